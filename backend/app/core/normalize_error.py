"""Error Normalizer — turns any raised failure into the uniform {message, details?} response body.

Invariants:
    - Output always has a "message" str; "details" only when field errors exist
    - Multi-field failures are flattened into one message joined by FIELD_DELIMITER
    - Tagged failures keep their message unchanged
    - Pure: no IO, no logging (callers log the normalized message)

Design Decisions:
    - Exhaustive match over the failure variants instead of attribute sniffing:
      one translation point between internal failures and the wire
    - Pydantic/FastAPI error lists converted to FieldError first, so every structured
      payload takes the same flattening path
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import DeliveryApiError, FieldError, ValidationFailure

FIELD_DELIMITER = "; "
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def field_errors_from_pydantic(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Convert pydantic-style error dicts (loc/msg) into FieldError values."""
    converted = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ()) if part not in _LOCATION_PREFIXES]
        name = ".".join(loc) or "request"
        converted.append(FieldError(name, f"{name}: {e.get('msg', 'invalid value')}"))
    return converted


def normalize_error(exc: BaseException) -> dict[str, Any]:
    """Translate a failure into the response body."""
    match exc:
        case ValidationFailure(field_errors=[_, *_] as field_errors):
            return {
                "message": FIELD_DELIMITER.join(e.message for e in field_errors),
                "details": [
                    {"field": e.field, "message": e.message} for e in field_errors
                ],
            }
        case DeliveryApiError(message=message):
            return {"message": message}
        case PydanticValidationError():
            return normalize_error(
                ValidationFailure.from_field_errors(
                    field_errors_from_pydantic(exc.errors()),
                ),
            )
        case _:
            return {"message": str(exc) or "An unexpected error occurred"}
