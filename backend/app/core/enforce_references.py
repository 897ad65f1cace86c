"""Reference Enforcement — existence, hierarchy and dependency checks on already-loaded records.

Invariants:
    - All functions are PURE: they inspect records the shell already fetched
    - Absence is NotFoundFailure (404); inconsistency is ValidationFailure (400);
      existing dependents are ConflictFailure (400) — three distinct failure classes
    - AddressIdentity compares street by fold_street (Unicode case fold); cep is already normalized

Design Decisions:
    - Checks return the record on success so handlers can chain `x = check_found(...)`
    - Duplicate-by-value key lives here so the query and any in-memory comparison agree
"""

import unicodedata
from dataclasses import dataclass
from typing import Any, TypeVar

from app.core.domain_types import Cep, CityId, StateId
from app.core.errors import ConflictFailure, NotFoundFailure, ValidationFailure
from app.core.repository_protocols import CityLike

T = TypeVar("T")


def check_found(record: T | None, message: str, entity: str, entity_id: Any) -> T:
    """Rule 1: a referenced entity must exist."""
    if record is None:
        raise NotFoundFailure(message, entity=entity, entity_id=entity_id)
    return record


def check_city_in_state(city: CityLike, state_id: StateId) -> CityLike:
    """Rule 2: a city must belong to the state it was addressed under."""
    if city.state_id != state_id:
        raise ValidationFailure(
            "The 'city_id' returned a city that doesn't match with the given 'state_id'",
        )
    return city


def check_no_dependents(dependents: int, message: str) -> None:
    """Rule 3: an entity referenced by others cannot be deleted."""
    if dependents > 0:
        raise ConflictFailure(message)


def fold_street(street: str) -> str:
    """Comparison key for a street: NFC, trimmed, Unicode case-folded ('SÃO' == 'são')."""
    return unicodedata.normalize("NFC", street.strip()).casefold()


@dataclass(frozen=True)
class AddressIdentity:
    """Fields that make two addresses the same logical address."""
    street: str
    number: int
    cep: Cep
    city_id: CityId

    @classmethod
    def of(cls, street: str, number: int, cep: Cep, city_id: CityId) -> "AddressIdentity":
        return cls(fold_street(street), number, cep, city_id)
