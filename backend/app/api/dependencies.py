"""Handler Dependencies — build request handlers with their repositories and logger.

Invariants:
    - Every handler instance is bound to the request's AsyncSession (get_db)
    - Loggers come from infrastructure/observability.get_handler_logger, one per resource

Design Decisions:
    - FastAPI Depends over module-level singletons: tests swap get_db and everything
      downstream follows
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.observability import get_handler_logger
from app.infrastructure.repositories import (
    SqlAddressRepository, SqlCityRepository, SqlDeliveryRepository,
    SqlPermissionRepository, SqlProductRepository, SqlStateRepository,
)
from app.services.handle_address import AddressHandlers
from app.services.handle_delivery import DeliveryHandlers
from app.services.handle_permission import PermissionHandlers
from app.services.handle_product import ProductHandlers


def get_address_handlers(db: AsyncSession = Depends(get_db)) -> AddressHandlers:
    return AddressHandlers(
        addresses=SqlAddressRepository(db),
        cities=SqlCityRepository(db),
        states=SqlStateRepository(db),
        logger=get_handler_logger("addresses"),
    )


def get_product_handlers(db: AsyncSession = Depends(get_db)) -> ProductHandlers:
    return ProductHandlers(SqlProductRepository(db), get_handler_logger("products"))


def get_permission_handlers(db: AsyncSession = Depends(get_db)) -> PermissionHandlers:
    return PermissionHandlers(
        SqlPermissionRepository(db), get_handler_logger("permissions"),
    )


def get_delivery_handlers(db: AsyncSession = Depends(get_db)) -> DeliveryHandlers:
    return DeliveryHandlers(SqlDeliveryRepository(db), get_handler_logger("deliveries"))
