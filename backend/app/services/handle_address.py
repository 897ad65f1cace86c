"""Address Handlers — list, create, partial update and delete for addresses.

Invariants:
    - create: numeric ids -> required keys -> field rules -> state/city -> duplicate -> insert
    - A duplicate-by-value create returns the existing id (duplicate=True), never a second row
    - update: address must exist, >= 1 mutable field, supplied fields validated, others untouched
    - delete: address must exist and have no deliveries
    - Failures are raised (core/errors.py); rendering is the global handler's job

Design Decisions:
    - Lost race on the unique index is resolved by re-reading the duplicate, so two
      concurrent identical creates still answer with one id
    - Handlers return plain results (AddressCreated, records); HTTP codes chosen by routes
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from app.core.domain_types import AddressId, CityId, StateId
from app.core.enforce_references import AddressIdentity, check_found
from app.core.errors import ConflictFailure
from app.core.filter_config import ADDRESS_FILTERS, build_filters
from app.core.repository_protocols import (
    AddressLike, AddressRepository, CityRepository, StateRepository,
)
from app.core.validate_fields import (
    check_numeric_ids, normalize_cep, require_any_field, require_fields,
    validate_complement, validate_house_number, validate_payload, validate_street,
)
from app.services.lookup_guards import (
    find_duplicate_address, forbid_address_in_use, require_address,
    require_city_in_state, require_state,
)

REQUIRED_FIELDS = ("street", "number", "cep")
MUTABLE_FIELDS = ("street", "number", "complement", "cep")

FIELD_RULES = {
    "street": validate_street,
    "number": validate_house_number,
    "complement": validate_complement,
    "cep": normalize_cep,
}


@dataclass(frozen=True)
class AddressCreated:
    address_id: int
    duplicate: bool = False


class AddressHandlers:
    """Address endpoints orchestration."""

    def __init__(
        self,
        addresses: AddressRepository,
        cities: CityRepository,
        states: StateRepository,
        logger: logging.Logger,
    ):
        self.addresses = addresses
        self.cities = cities
        self.states = states
        self.logger = logger

    async def list_addresses(self, params: Mapping[str, Any]) -> Sequence[AddressLike]:
        filters = build_filters(ADDRESS_FILTERS, params)
        found = await self.addresses.find_all(filters)
        if found:
            self.logger.info(f"Listing addresses: {len(found)} found")
        else:
            self.logger.info("No address found")
        return found

    async def create_address(
        self, state_id: Any, city_id: Any, payload: Any,
    ) -> AddressCreated:
        ids = check_numeric_ids({"state": state_id, "city": city_id})
        require_fields(payload, REQUIRED_FIELDS)
        fields = validate_payload(payload, FIELD_RULES)

        state = await require_state(self.states, StateId(ids["state"]))
        city = await require_city_in_state(self.cities, CityId(ids["city"]), state)

        identity = AddressIdentity.of(
            fields["street"], fields["number"], fields["cep"], CityId(city.id),
        )
        existing = await find_duplicate_address(self.addresses, identity)
        if existing:
            self.logger.info(f"Address {existing.id} already exists")
            return AddressCreated(existing.id, duplicate=True)

        try:
            address = await self.addresses.create({**fields, "city_id": city.id})
        except ConflictFailure:
            existing = await find_duplicate_address(self.addresses, identity)
            if not existing:
                raise
            self.logger.info(f"Address {existing.id} created concurrently, reusing it")
            return AddressCreated(existing.id, duplicate=True)

        self.logger.info(f"Address {address.id} added successfully")
        return AddressCreated(address.id)

    async def update_address(self, address_id: Any, payload: Any) -> AddressLike:
        """Partial update: only supplied fields change."""
        record_id = AddressId(check_numeric_ids({"address": address_id})["address"])
        await require_address(self.addresses, record_id)

        supplied = require_any_field(payload, MUTABLE_FIELDS)
        changes = validate_payload(
            supplied, {key: FIELD_RULES[key] for key in supplied},
        )
        address = check_found(
            await self.addresses.update(record_id, changes),
            "Address not found.", "Address", record_id,
        )
        self.logger.info(f"Address {record_id} updated successfully")
        return address

    async def delete_address(self, address_id: Any) -> None:
        record_id = AddressId(check_numeric_ids({"address": address_id})["address"])
        address = await require_address(self.addresses, record_id)
        await forbid_address_in_use(self.addresses, record_id)
        await self.addresses.delete(address)
        self.logger.info(f"Address {record_id} deleted successfully")
