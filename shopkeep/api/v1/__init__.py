"""API routes. Everything except auth login/register and health sits behind the Bearer guard."""

from fastapi import APIRouter, Depends

from shopkeep.api.v1 import (
    auth,
    categories,
    health,
    permissions,
    products,
    roles,
    settings,
    users,
)
from shopkeep.api.v1.auth import get_current_user

protected = [Depends(get_current_user)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"], dependencies=protected)
router.include_router(roles.router, prefix="/roles", tags=["roles"], dependencies=protected)
router.include_router(
    permissions.router, prefix="/permissions", tags=["permissions"], dependencies=protected
)
router.include_router(
    categories.router, prefix="/categories", tags=["categories"], dependencies=protected
)
router.include_router(
    products.router, prefix="/products", tags=["products"], dependencies=protected
)
router.include_router(
    settings.router, prefix="/settings", tags=["settings"], dependencies=protected
)
