"""Error Normalizer — tests for the uniform {message, details?} body.

Tests cover:
    - Multi-field ValidationFailure flattened with "; " and itemized in details
    - Tagged failures keep their message unchanged, no details
    - Pydantic ValidationError flattened like any structured payload
    - Plain exceptions pass their message through
"""

import pytest
from pydantic import BaseModel, ValidationError

from app.core.errors import (
    ConflictFailure, FieldError, NotFoundFailure, ValidationFailure,
)
from app.core.normalize_error import (
    FIELD_DELIMITER, field_errors_from_pydantic, normalize_error,
)


class _Sample(BaseModel):
    name: str
    price: float


def test_field_errors_flattened_into_one_message():
    exc = ValidationFailure.from_field_errors([
        FieldError("name", "The 'name' field was not sent."),
        FieldError("suggested_price", "The 'suggested_price' field must be greater than 0."),
    ])
    body = normalize_error(exc)
    assert body["message"] == (
        "The 'name' field was not sent."
        + FIELD_DELIMITER
        + "The 'suggested_price' field must be greater than 0."
    )
    assert body["details"] == [
        {"field": "name", "message": "The 'name' field was not sent."},
        {
            "field": "suggested_price",
            "message": "The 'suggested_price' field must be greater than 0.",
        },
    ]


def test_single_message_validation_failure_has_no_details():
    body = normalize_error(ValidationFailure("The 'cep' param is invalid"))
    assert body == {"message": "The 'cep' param is invalid"}


@pytest.mark.parametrize("exc", [
    NotFoundFailure("Address not found.", entity="Address", entity_id=3),
    ConflictFailure("Address in use. It cannot be deleted."),
])
def test_tagged_failures_pass_message_unchanged(exc):
    assert normalize_error(exc) == {"message": exc.message}


def test_pydantic_errors_are_flattened():
    with pytest.raises(ValidationError) as caught:
        _Sample.model_validate({"price": "abc"})
    body = normalize_error(caught.value)
    assert [d["field"] for d in body["details"]] == ["name", "price"]
    assert body["message"].count(FIELD_DELIMITER) == 1


def test_plain_exception_message_passes_through():
    assert normalize_error(RuntimeError("boom")) == {"message": "boom"}


def test_plain_exception_without_message_gets_generic_text():
    assert normalize_error(RuntimeError())["message"] == "An unexpected error occurred"


def test_location_prefixes_are_dropped_from_field_names():
    errors = field_errors_from_pydantic([
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
        {"loc": ("body",), "msg": "JSON decode error"},
    ])
    assert errors[0] == FieldError("limit", "limit: Input should be a valid integer")
    assert errors[1].field == "request"
