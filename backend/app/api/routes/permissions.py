"""Permission Routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_permission_handlers
from app.services.handle_permission import PermissionHandlers

router = APIRouter(prefix="/api/v1/permissions", tags=["permissions"])


@router.post("")
async def create_permission(
    payload: Any = Body(None),
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    """Create a permission. Body: {"description": "READ"}."""
    await handlers.create_permission(payload)
    return {"message": "Permission created successfully."}
