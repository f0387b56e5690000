"""Roles: CRUD, with the role's permission set given by permission name."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import commit_unique, ensure_unique, field_error, get_or_404
from shopkeep.core.database import get_db
from shopkeep.models import Permission, Role
from shopkeep.schemas.auth import MessageResponse
from shopkeep.schemas.role import RoleCreate, RoleRead, RoleUpdate

router = APIRouter()


def _resolve_permissions(db: Session, names: list[str]) -> list[Permission]:
    """Load permissions by name; any unknown name is a 422 on `permissions`."""
    wanted = list(dict.fromkeys(names))
    if not wanted:
        return []
    found = db.query(Permission).filter(Permission.name.in_(wanted)).all()
    missing = sorted(set(wanted) - {p.name for p in found})
    if missing:
        raise field_error(
            "permissions",
            f"Unknown permission(s): {', '.join(missing)}.",
            "exists",
        )
    return found


@router.get("", response_model=list[RoleRead])
def list_roles(db: Annotated[Session, Depends(get_db)]) -> list[Role]:
    return db.query(Role).order_by(Role.id).all()


@router.post("", response_model=RoleRead, status_code=201)
def create_role(
    body: RoleCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Role:
    ensure_unique(db, Role.name, body.name, "name")
    role = Role(name=body.name, guard_name=body.guard_name)
    role.permissions = _resolve_permissions(db, body.permissions)
    db.add(role)
    commit_unique(db, "name")
    db.refresh(role)
    return role


@router.get("/{role_id}", response_model=RoleRead)
def get_role(role_id: int, db: Annotated[Session, Depends(get_db)]) -> Role:
    return get_or_404(db, Role, role_id, "Role")


@router.put("/{role_id}", response_model=RoleRead)
def update_role(
    role_id: int,
    body: RoleUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Role:
    """Partial update; a given permissions list replaces the role's permission set."""
    role = get_or_404(db, Role, role_id, "Role")
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in changes:
        ensure_unique(db, Role.name, changes["name"], "name", exclude_id=role.id)
        role.name = changes["name"]
    if "guard_name" in changes:
        role.guard_name = changes["guard_name"]
    if "permissions" in changes:
        role.permissions = _resolve_permissions(db, changes["permissions"])
    commit_unique(db, "name")
    db.refresh(role)
    return role


@router.delete("/{role_id}", response_model=MessageResponse)
def delete_role(role_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    role = get_or_404(db, Role, role_id, "Role")
    db.delete(role)
    db.commit()
    return MessageResponse(message="Role deleted")
