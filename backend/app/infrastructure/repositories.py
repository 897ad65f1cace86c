"""SQL Repositories — SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One AsyncSession per repository instance (the request's session from get_db)
    - Every write commits immediately: one persistence operation per request
    - IntegrityError on write -> rollback, then ConflictFailure (never a raw SQLAlchemy error)
    - FilterClause -> SQL translation lives only here
    - Ids outside the 32-bit column range never reach the driver: get answers None
      and an EQUALS filter on one matches nothing

Design Decisions:
    - Shared _SqlRepository base over per-entity copies: entities differ only in model,
      conflict message and count_related query
    - CONTAINS uses icontains(autoescape=True): user text is matched literally, % and _ included
"""

import logging
from typing import Any, Sequence

from sqlalchemy import false, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MatchMode, fits_int_column
from app.core.enforce_references import AddressIdentity
from app.core.errors import ConflictFailure
from app.core.filter_config import FilterClause
from app.models import (
    Address, City, Delivery, Permission, Product, ProductSale, State,
)

logger = logging.getLogger(__name__)


def to_condition(model: type, clause: FilterClause):
    """Translate one FilterClause into a SQLAlchemy boolean expression."""
    column = getattr(model, clause.column)
    match clause.mode:
        case MatchMode.EQUALS:
            if isinstance(clause.value, int) and not fits_int_column(clause.value):
                return false()
            return column == clause.value
        case MatchMode.CONTAINS:
            return column.icontains(clause.value, autoescape=True)
        case MatchMode.MIN:
            return column >= clause.value
        case MatchMode.MAX:
            return column <= clause.value
    raise ValueError(f"Unsupported match mode: {clause.mode}")


class _SqlRepository:
    model: type
    conflict_message = "Record conflicts with an existing one"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self, filters: list[FilterClause]) -> Sequence[Any]:
        query = (
            select(self.model)
            .where(*(to_condition(self.model, c) for c in filters))
            .order_by(self.model.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get(self, record_id: int) -> Any | None:
        if not fits_int_column(record_id):
            return None
        return await self.db.get(self.model, record_id)

    async def create(self, fields: dict[str, Any]) -> Any:
        record = self.model(**fields)
        self.db.add(record)
        await self._commit()
        await self.db.refresh(record)
        return record

    async def update(self, record_id: int, fields: dict[str, Any]) -> Any | None:
        record = await self.get(record_id)
        if record is None:
            return None
        for name, value in fields.items():
            setattr(record, name, value)
        await self._commit()
        await self.db.refresh(record)
        return record

    async def delete(self, record: Any) -> None:
        await self.db.delete(record)
        await self.db.commit()

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{self.model.__name__} write rejected by constraint: {e.orig}")
            raise ConflictFailure(self.conflict_message)


class SqlStateRepository(_SqlRepository):
    model = State


class SqlCityRepository(_SqlRepository):
    model = City


class SqlAddressRepository(_SqlRepository):
    model = Address
    conflict_message = "Address already exists"

    async def find_duplicate(self, identity: AddressIdentity) -> Address | None:
        result = await self.db.execute(
            select(Address)
            .where(Address.street_key == identity.street)
            .where(Address.number == identity.number)
            .where(Address.cep == identity.cep)
            .where(Address.city_id == identity.city_id)
            .order_by(Address.id)
            .limit(1)
        )
        return result.scalars().first()

    async def count_related(self, address_id: int) -> int:
        """Number of deliveries shipping to this address."""
        result = await self.db.execute(
            select(func.count())
            .select_from(Delivery)
            .where(Delivery.address_id == address_id)
        )
        return result.scalar_one()


class SqlProductRepository(_SqlRepository):
    model = Product

    async def count_related(self, product_id: int) -> int:
        """Number of sale lines containing this product."""
        result = await self.db.execute(
            select(func.count())
            .select_from(ProductSale)
            .where(ProductSale.product_id == product_id)
        )
        return result.scalar_one()


class SqlPermissionRepository(_SqlRepository):
    model = Permission
    conflict_message = "Permission already exists"


class SqlDeliveryRepository(_SqlRepository):
    model = Delivery
