"""User administration: list, create, show, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import commit_unique, ensure_unique, get_or_404
from shopkeep.core.database import get_db
from shopkeep.core.security import hash_password
from shopkeep.models import User
from shopkeep.schemas.auth import MessageResponse, UserRead
from shopkeep.schemas.user import UserCreate, UserUpdate

router = APIRouter()


@router.get("", response_model=list[UserRead])
def list_users(db: Annotated[Session, Depends(get_db)]) -> list[User]:
    return db.query(User).order_by(User.id).all()


@router.post("", response_model=UserRead, status_code=201)
def create_user(
    body: UserCreate,
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Create a user. Duplicate e-mail is a 422 on `email`."""
    ensure_unique(db, User.email, body.email, "email")
    user = User(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
    )
    db.add(user)
    commit_unique(db, "email")
    db.refresh(user)
    return user


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> User:
    return get_or_404(db, User, user_id, "User")


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Update name, email and/or password; omitted fields are unchanged."""
    user = get_or_404(db, User, user_id, "User")
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes:
        ensure_unique(db, User.email, changes["email"], "email", exclude_id=user.id)
        user.email = changes["email"]
    if "name" in changes:
        user.name = changes["name"]
    if "password" in changes:
        user.password_hash = hash_password(changes["password"])
    commit_unique(db, "email")
    db.refresh(user)
    return user


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    user = get_or_404(db, User, user_id, "User")
    db.delete(user)
    db.commit()
    return MessageResponse(message="User deleted")
