"""Filter Configuration — tests for table-driven query filters.

Tests cover:
    - Absent / blank params produce no clauses
    - Each spec yields the configured column and match mode
    - Invalid numeric values raise ValidationFailure naming the param
"""

from decimal import Decimal

import pytest

from app.core.domain_types import MatchMode
from app.core.errors import ValidationFailure
from app.core.filter_config import (
    ADDRESS_FILTERS, DELIVERY_FILTERS, PRODUCT_FILTERS, FilterClause, build_filters,
)


def test_no_params_no_clauses():
    assert build_filters(ADDRESS_FILTERS, {}) == []
    assert build_filters(ADDRESS_FILTERS, {"city_id": None, "street": " "}) == []


def test_address_filters_modes():
    clauses = build_filters(
        ADDRESS_FILTERS, {"city_id": "3", "street": "Flor", "cep": "89229780"},
    )
    assert clauses == [
        FilterClause("city_id", MatchMode.EQUALS, 3),
        FilterClause("street", MatchMode.CONTAINS, "Flor"),
        FilterClause("cep", MatchMode.EQUALS, "89229780"),
    ]


def test_unknown_params_are_ignored():
    assert build_filters(ADDRESS_FILTERS, {"drop_table": "addresses"}) == []


def test_product_price_range():
    clauses = build_filters(
        PRODUCT_FILTERS, {"price_min": "10", "price_max": "20.5"},
    )
    assert clauses == [
        FilterClause("suggested_price", MatchMode.MIN, Decimal("10")),
        FilterClause("suggested_price", MatchMode.MAX, Decimal("20.5")),
    ]


def test_invalid_price_filter_rejected():
    with pytest.raises(ValidationFailure, match="price_max"):
        build_filters(PRODUCT_FILTERS, {"price_max": "lots"})


def test_invalid_id_filter_rejected():
    with pytest.raises(ValidationFailure) as exc:
        build_filters(DELIVERY_FILTERS, {"address_id": "abc"})
    assert exc.value.message == "A numeric id is required for address_id."
