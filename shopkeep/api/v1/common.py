"""Shared helpers for CRUD routes: 404 lookups and field-level 422 errors."""

from typing import Any, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopkeep.models import MAX_INT_ID

ModelT = TypeVar("ModelT")


def field_error(field: str, msg: str, error_type: str = "value_error") -> HTTPException:
    """422 in the same shape FastAPI uses for request validation errors."""
    return HTTPException(
        status_code=422,
        detail=[{"loc": ["body", field], "msg": msg, "type": error_type}],
    )


def unique_error(field: str) -> HTTPException:
    return field_error(field, f"The {field} has already been taken.", "unique")


def get_or_404(db: Session, model: type[ModelT], ident: int, label: str) -> ModelT:
    """Fetch a row by primary key or raise 404 '<label> not found.'."""
    # Ids outside the column range cannot exist; the driver would raise on them.
    row = db.get(model, ident) if 1 <= ident <= MAX_INT_ID else None
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found.",
        )
    return row


def ensure_unique(db: Session, column: Any, value: Any, field: str, exclude_id: int | None = None) -> None:
    """Raise a 422 on field if another row already holds value in column."""
    query = db.query(column.class_).filter(column == value)
    if exclude_id is not None:
        query = query.filter(column.class_.id != exclude_id)
    if query.first() is not None:
        raise unique_error(field)


def commit_unique(db: Session, field: str) -> None:
    """Commit; a unique-constraint race at commit becomes the same 422 as the pre-check."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise unique_error(field) from e
