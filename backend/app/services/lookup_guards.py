"""Lookup Guards — fetch referenced records and apply the pure reference checks.

Invariants:
    - Each guard performs at most one repository read, then delegates to core/enforce_references.py
    - Guards raise; they never return sentinel values
    - find_duplicate_address is a best-effort pre-check; the unique index is the backstop

Design Decisions:
    - Thin async wrappers: the IO lives here, the rule lives in core
"""

from app.core.domain_types import AddressId, CityId, ProductId, StateId
from app.core.enforce_references import (
    AddressIdentity, check_city_in_state, check_found, check_no_dependents,
)
from app.core.repository_protocols import (
    AddressLike, AddressRepository, CityLike, CityRepository,
    ProductLike, ProductRepository, StateLike, StateRepository,
)


async def require_state(states: StateRepository, state_id: StateId) -> StateLike:
    return check_found(
        await states.get(state_id),
        "Couldn't find any state with the given 'state_id'",
        "State", state_id,
    )


async def require_city_in_state(
    cities: CityRepository, city_id: CityId, state: StateLike,
) -> CityLike:
    """City must exist (404) and belong to the state (400)."""
    city = check_found(
        await cities.get(city_id),
        "Couldn't find any city with the given 'city_id'",
        "City", city_id,
    )
    return check_city_in_state(city, StateId(state.id))


async def require_address(
    addresses: AddressRepository, address_id: AddressId,
) -> AddressLike:
    return check_found(
        await addresses.get(address_id),
        "Address not found.", "Address", address_id,
    )


async def require_product(
    products: ProductRepository, product_id: ProductId,
) -> ProductLike:
    return check_found(
        await products.get(product_id),
        "Product not found.", "Product", product_id,
    )


async def forbid_address_in_use(
    addresses: AddressRepository, address_id: AddressId,
) -> None:
    check_no_dependents(
        await addresses.count_related(address_id),
        "Address in use. It cannot be deleted.",
    )


async def forbid_product_sold(
    products: ProductRepository, product_id: ProductId,
) -> None:
    check_no_dependents(
        await products.count_related(product_id),
        "Product cannot be deleted, it has already been sold.",
    )


async def find_duplicate_address(
    addresses: AddressRepository, identity: AddressIdentity,
) -> AddressLike | None:
    return await addresses.find_duplicate(identity)
