"""Products: CRUD. category_id, when given, must reference an existing category."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import field_error, get_or_404
from shopkeep.core.database import get_db
from shopkeep.models import Category, Product
from shopkeep.schemas.auth import MessageResponse
from shopkeep.schemas.catalog import ProductCreate, ProductRead, ProductUpdate

router = APIRouter()

# Columns that may not be set to null through an update.
NON_NULLABLE_FIELDS = frozenset({"name", "price", "stock"})


def _check_category(db: Session, category_id: int | None) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise field_error("category_id", "The selected category_id is invalid.", "exists")


@router.get("", response_model=list[ProductRead])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[Product]:
    return db.query(Product).order_by(Product.id).all()


@router.post("", response_model=ProductRead, status_code=201)
def create_product(
    body: ProductCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Product:
    _check_category(db, body.category_id)
    product = Product(**body.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, db: Annotated[Session, Depends(get_db)]) -> Product:
    return get_or_404(db, Product, product_id, "Product")


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Product:
    """Partial update; category_id may be set to null to uncategorize."""
    product = get_or_404(db, Product, product_id, "Product")
    changes = {
        field: value
        for field, value in body.model_dump(exclude_unset=True).items()
        if value is not None or field not in NON_NULLABLE_FIELDS
    }
    if "category_id" in changes:
        _check_category(db, changes["category_id"])
    for field, value in changes.items():
        setattr(product, field, value)
    db.commit()
    db.refresh(product)
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    product = get_or_404(db, Product, product_id, "Product")
    db.delete(product)
    db.commit()
    return MessageResponse(message="Product deleted")
