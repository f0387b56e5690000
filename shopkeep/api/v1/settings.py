"""Settings: key-value CRUD addressed by key."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import commit_unique, ensure_unique
from shopkeep.core.database import get_db
from shopkeep.models import Setting
from shopkeep.schemas.auth import MessageResponse
from shopkeep.schemas.setting import SettingCreate, SettingRead, SettingUpdate

router = APIRouter()


def _get_by_key_or_404(db: Session, key: str) -> Setting:
    setting = db.query(Setting).filter(Setting.key == key).first()
    if setting is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Setting not found.",
        )
    return setting


@router.get("", response_model=list[SettingRead])
def list_settings(db: Annotated[Session, Depends(get_db)]) -> list[Setting]:
    return db.query(Setting).order_by(Setting.id).all()


@router.get("/{key}", response_model=SettingRead)
def get_setting_by_key(key: str, db: Annotated[Session, Depends(get_db)]) -> Setting:
    return _get_by_key_or_404(db, key)


@router.post("", response_model=SettingRead, status_code=201)
def create_setting(
    body: SettingCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Setting:
    """Create a setting. Duplicate key is a 422 on `key`."""
    ensure_unique(db, Setting.key, body.key, "key")
    setting = Setting(key=body.key, value=body.value)
    db.add(setting)
    commit_unique(db, "key")
    db.refresh(setting)
    return setting


@router.put("/{key}", response_model=SettingRead)
def update_setting(
    key: str,
    body: SettingUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Setting:
    """Replace the value stored under key (when given). Missing key is a 404."""
    setting = _get_by_key_or_404(db, key)
    if "value" in body.model_fields_set:
        setting.value = body.value
    db.commit()
    db.refresh(setting)
    return setting


@router.delete("/{key}", response_model=MessageResponse)
def delete_setting(key: str, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    setting = _get_by_key_or_404(db, key)
    db.delete(setting)
    db.commit()
    return MessageResponse(message="Setting deleted")
