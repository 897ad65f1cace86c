"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell (infrastructure/repositories.py) via dependency injection
    - create/update raise ConflictFailure when a storage uniqueness rule rejects the write

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Record protocols (CityLike, AddressLike...) describe the attributes handlers read,
      so handlers never import ORM models
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol, Sequence

from app.core.domain_types import (
    AddressId, CityId, PermissionId, ProductId, StateId,
)

if TYPE_CHECKING:
    from app.core.enforce_references import AddressIdentity
    from app.core.filter_config import FilterClause


class StateLike(Protocol):
    id: int
    name: str
    initials: str


class CityLike(Protocol):
    id: int
    name: str
    state_id: int


class AddressLike(Protocol):
    id: int
    street: str
    number: int
    complement: str
    cep: str
    city_id: int


class ProductLike(Protocol):
    id: int
    name: str
    suggested_price: Decimal


class PermissionLike(Protocol):
    id: int
    description: str


class StateRepository(Protocol):
    async def get(self, state_id: StateId) -> StateLike | None: ...


class CityRepository(Protocol):
    async def get(self, city_id: CityId) -> CityLike | None: ...


class AddressRepository(Protocol):
    """Contract for address persistence — implemented by shell."""
    async def find_all(self, filters: list[FilterClause]) -> Sequence[AddressLike]: ...
    async def get(self, address_id: AddressId) -> AddressLike | None: ...
    async def find_duplicate(self, identity: AddressIdentity) -> AddressLike | None: ...
    async def create(self, fields: dict[str, Any]) -> AddressLike: ...
    async def update(
        self, address_id: AddressId, fields: dict[str, Any],
    ) -> AddressLike | None: ...
    async def delete(self, record: AddressLike) -> None: ...
    async def count_related(self, address_id: AddressId) -> int: ...


class ProductRepository(Protocol):
    """Contract for product persistence — count_related counts sales of the product."""
    async def find_all(self, filters: list[FilterClause]) -> Sequence[ProductLike]: ...
    async def get(self, product_id: ProductId) -> ProductLike | None: ...
    async def create(self, fields: dict[str, Any]) -> ProductLike: ...
    async def update(
        self, product_id: ProductId, fields: dict[str, Any],
    ) -> ProductLike | None: ...
    async def delete(self, record: ProductLike) -> None: ...
    async def count_related(self, product_id: ProductId) -> int: ...


class PermissionRepository(Protocol):
    async def get(self, permission_id: PermissionId) -> PermissionLike | None: ...
    async def create(self, fields: dict[str, Any]) -> PermissionLike: ...


class DeliveryRepository(Protocol):
    async def find_all(self, filters: list[FilterClause]) -> Sequence[Any]: ...
