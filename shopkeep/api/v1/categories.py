"""Categories: CRUD."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import get_or_404
from shopkeep.core.database import get_db
from shopkeep.models import Category
from shopkeep.schemas.auth import MessageResponse
from shopkeep.schemas.catalog import CategoryCreate, CategoryRead, CategoryUpdate

router = APIRouter()


@router.get("", response_model=list[CategoryRead])
def list_categories(db: Annotated[Session, Depends(get_db)]) -> list[Category]:
    return db.query(Category).order_by(Category.id).all()


@router.post("", response_model=CategoryRead, status_code=201)
def create_category(
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Category:
    category = Category(**body.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, db: Annotated[Session, Depends(get_db)]) -> Category:
    return get_or_404(db, Category, category_id, "Category")


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Category:
    category = get_or_404(db, Category, category_id, "Category")
    changes = body.model_dump(exclude_unset=True)
    # name is required on the row; an explicit null leaves it unchanged.
    if changes.get("name") is None:
        changes.pop("name", None)
    for field, value in changes.items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    return category


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    """Delete a category; its products become uncategorized."""
    category = get_or_404(db, Category, category_id, "Category")
    db.delete(category)
    db.commit()
    return MessageResponse(message="Category deleted")
