"""Permissions: list and create."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import commit_unique, ensure_unique
from shopkeep.core.database import get_db
from shopkeep.models import Permission
from shopkeep.schemas.role import PermissionCreate, PermissionRead

router = APIRouter()


@router.get("", response_model=list[PermissionRead])
def list_permissions(db: Annotated[Session, Depends(get_db)]) -> list[Permission]:
    return db.query(Permission).order_by(Permission.id).all()


@router.post("", response_model=PermissionRead, status_code=201)
def create_permission(
    body: PermissionCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Permission:
    """Create a permission. Names are unique."""
    ensure_unique(db, Permission.name, body.name, "name")
    permission = Permission(name=body.name, guard_name=body.guard_name)
    db.add(permission)
    commit_unique(db, "name")
    db.refresh(permission)
    return permission
