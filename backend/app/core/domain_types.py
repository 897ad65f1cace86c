"""Domain Types — identity wrappers and enums shared across the codebase.

Invariants:
    - Entity ids are positive integers wrapped in NewType (never bare int in handler signatures)
    - MatchMode enumerates every supported filter comparison — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StateId = NewType("StateId", int)
CityId = NewType("CityId", int)
AddressId = NewType("AddressId", int)
ProductId = NewType("ProductId", int)
PermissionId = NewType("PermissionId", int)
SaleId = NewType("SaleId", int)
DeliveryId = NewType("DeliveryId", int)


# ─── Value Types ─────────────────────────────────────────────────

Cep = NewType("Cep", str)   # exactly 8 digits, no separator


# ─── Storage Bounds ──────────────────────────────────────────────

INT_COLUMN_MIN = -(2 ** 31)
INT_COLUMN_MAX = 2 ** 31 - 1


def fits_int_column(value: int) -> bool:
    """Integer id and number columns are 32-bit signed."""
    return INT_COLUMN_MIN <= value <= INT_COLUMN_MAX


# ─── Enums ───────────────────────────────────────────────────────

class MatchMode(str, Enum):
    """How a query filter value is compared against its column."""
    EQUALS = "equals"
    CONTAINS = "contains"
    MIN = "min"
    MAX = "max"
