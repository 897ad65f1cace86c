"""Permission Handlers — create a permission tag (READ, WRITE, UPDATE, DELETE...)."""

import logging
from typing import Any

from app.core.repository_protocols import PermissionLike, PermissionRepository
from app.core.validate_fields import require_fields, validate_payload, validate_text


class PermissionHandlers:

    def __init__(self, permissions: PermissionRepository, logger: logging.Logger):
        self.permissions = permissions
        self.logger = logger

    async def create_permission(self, payload: Any) -> PermissionLike:
        require_fields(payload, ("description",))
        fields = validate_payload(
            payload, {"description": lambda value: validate_text(value, "description")},
        )
        permission = await self.permissions.create(fields)
        self.logger.info(f"Permission {permission.description} created")
        return permission
