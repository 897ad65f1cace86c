"""Filter Configuration — explicit table of query filters supported by each list endpoint.

Invariants:
    - Only keys listed in a FilterSpec table ever reach a query (unknown params are ignored)
    - Absent or blank values produce no clause
    - Value parsing happens here, before any IO; invalid values raise ValidationFailure

Design Decisions:
    - Table-driven over ad-hoc if-chains per handler: adding a filter is one line
    - Clauses are plain data (column name, MatchMode, value); the repository translates
      them to SQL so core stays free of SQLAlchemy
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from app.core.domain_types import MatchMode
from app.core.validate_fields import parse_optional_id, parse_optional_number


@dataclass(frozen=True)
class FilterSpec:
    key: str
    column: str
    mode: MatchMode
    parse: Callable[[Any, str], Any]


@dataclass(frozen=True)
class FilterClause:
    column: str
    mode: MatchMode
    value: Any


def parse_text(value: Any, name: str) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


ADDRESS_FILTERS: tuple[FilterSpec, ...] = (
    FilterSpec("city_id", "city_id", MatchMode.EQUALS, parse_optional_id),
    FilterSpec("street", "street", MatchMode.CONTAINS, parse_text),
    FilterSpec("cep", "cep", MatchMode.EQUALS, parse_text),
)

PRODUCT_FILTERS: tuple[FilterSpec, ...] = (
    FilterSpec("name", "name", MatchMode.CONTAINS, parse_text),
    FilterSpec("price_min", "suggested_price", MatchMode.MIN, parse_optional_number),
    FilterSpec("price_max", "suggested_price", MatchMode.MAX, parse_optional_number),
)

DELIVERY_FILTERS: tuple[FilterSpec, ...] = (
    FilterSpec("address_id", "address_id", MatchMode.EQUALS, parse_optional_id),
    FilterSpec("sale_id", "sale_id", MatchMode.EQUALS, parse_optional_id),
)


def build_filters(
    specs: tuple[FilterSpec, ...], params: Mapping[str, Any],
) -> list[FilterClause]:
    """Build the clause list for the params present in the request."""
    clauses = []
    for spec in specs:
        value = spec.parse(params.get(spec.key), spec.key)
        if value is not None:
            clauses.append(FilterClause(spec.column, spec.mode, value))
    return clauses
