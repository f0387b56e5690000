"""Request/response schemas for categories and products."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from shopkeep.models.base import MAX_INT_ID


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class CategoryRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    """Create a product. price is a non-negative amount with two decimal places."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(default=0, ge=0, le=MAX_INT_ID)
    category_id: int | None = Field(default=None, ge=1, le=MAX_INT_ID)


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(default=None, ge=0, le=MAX_INT_ID)
    category_id: int | None = Field(default=None, ge=1, le=MAX_INT_ID)


class ProductRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: Decimal
    stock: int
    category_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
