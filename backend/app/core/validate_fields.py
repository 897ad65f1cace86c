"""Field Validators — pure checks on raw request values (query strings, JSON bodies).

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Each validator returns the accepted (possibly normalized) value or raises ValidationFailure
    - A stored cep is always exactly 8 ASCII digits, no separator
    - Booleans never count as numbers (JSON true/false are not ids, prices or house numbers)

Design Decisions:
    - Raise ValidationFailure instead of returning error dicts: handlers stay linear and the
      global exception handler is the only place that renders a response
    - Decimal for numeric parsing: "19.90" round-trips into Numeric columns without float drift
    - validate_payload collects every field error before raising, so one response names all bad fields
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable

from app.core.domain_types import INT_COLUMN_MAX, Cep
from app.core.errors import FieldError, ValidationFailure

CEP_LENGTH = 8
CEP_SEPARATOR_INDEX = 5


def _to_decimal(value: Any) -> Decimal | None:
    """Parse value as a finite number, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def _to_int(value: Any) -> int | None:
    number = _to_decimal(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


def join_names(names: Iterable[str], quote: bool = False) -> str:
    """'a', 'b', 'c' -> "a, b and c"."""
    items = [f"'{n}'" if quote else n for n in names]
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


# ─── Identifiers ─────────────────────────────────────────────────

def check_numeric_ids(ids: dict[str, Any]) -> dict[str, int]:
    """Parse every named id; reject once, naming exactly the ids that failed."""
    parsed = {name: _to_int(value) for name, value in ids.items()}
    failed = [name for name, value in parsed.items() if value is None]
    if failed:
        raise ValidationFailure(f"A numeric id is required for {join_names(failed)}.")
    return parsed


def parse_optional_id(value: Any, name: str) -> int | None:
    """Query-string id filter: blank means 'no filter'."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return check_numeric_ids({name: value})[name]


def parse_optional_number(value: Any, name: str) -> Decimal | None:
    """Query-string numeric filter: blank means 'no filter'."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    number = _to_decimal(value)
    if number is None:
        raise ValidationFailure(f"The '{name}' query must be a number")
    return number


# ─── Address fields ──────────────────────────────────────────────

def validate_street(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationFailure("The 'street' param must be a string")
    if not value.strip():
        raise ValidationFailure("The 'street' param cannot be empty")
    return value.strip()


def validate_house_number(value: Any) -> int:
    """Positive integer that fits the number column; one message for every rejection."""
    number = _to_int(value)
    if number is None or not 0 < number <= INT_COLUMN_MAX:
        raise ValidationFailure("The 'number' param must be a number")
    return number


def validate_complement(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationFailure("The 'complement' param must be a string")
    return value.strip()


def normalize_cep(value: Any) -> Cep:
    """Accept '12345678' or '12345-678'; return the 8-digit stored form."""
    if not isinstance(value, str):
        raise ValidationFailure("The 'cep' param must be a string")
    if len(value) not in (CEP_LENGTH, CEP_LENGTH + 1):
        raise ValidationFailure("The 'cep' param is invalid")
    if len(value) == CEP_LENGTH + 1:
        if value[CEP_SEPARATOR_INDEX] != "-":
            raise ValidationFailure("The 'cep' param format is invalid")
        value = value[:CEP_SEPARATOR_INDEX] + value[CEP_SEPARATOR_INDEX + 1:]
    if not (value.isascii() and value.isdigit()):
        raise ValidationFailure("The 'cep' param format is invalid")
    return Cep(value)


# ─── Product / permission fields ─────────────────────────────────

def validate_text(value: Any, name: str) -> str:
    """Required, non-empty free text (product name, permission description)."""
    if value is None:
        raise ValidationFailure(f"The '{name}' field was not sent.")
    if not isinstance(value, str):
        raise ValidationFailure(f"The '{name}' field must be a string.")
    if not value.strip():
        raise ValidationFailure(f"The '{name}' field cannot be empty.")
    return value.strip()


def validate_price(value: Any, name: str = "suggested_price") -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationFailure(f"The '{name}' field was not sent.")
    price = _to_decimal(value)
    if price is None:
        raise ValidationFailure(f"The '{name}' field must be a number.")
    if price <= 0:
        raise ValidationFailure(f"The '{name}' field must be greater than 0.")
    return price


# ─── Payload-level checks ────────────────────────────────────────

def require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationFailure("The request body must be a JSON object")
    return payload


def require_fields(payload: Any, required: tuple[str, ...]) -> dict:
    """Every required key must be present before any field rule runs."""
    require_object(payload)
    if not all(key in payload for key in required):
        raise ValidationFailure(
            f"The {join_names(required, quote=True)} params are required in the req body",
        )
    return payload


def require_any_field(payload: Any, mutable: tuple[str, ...]) -> dict:
    """Partial updates need at least one mutable field with a value."""
    require_object(payload)
    supplied = {k: payload[k] for k in mutable if payload.get(k) is not None}
    if not supplied:
        raise ValidationFailure(
            "At least one field must be sent for the update: "
            f"{join_names(mutable, quote=True)}",
        )
    return supplied


def validate_payload(
    payload: dict, rules: dict[str, Callable[[Any], Any]],
) -> dict[str, Any]:
    """Run each rule against payload[key]; raise once with every rejected field."""
    accepted: dict[str, Any] = {}
    errors: list[FieldError] = []
    for key, rule in rules.items():
        try:
            accepted[key] = rule(payload.get(key))
        except ValidationFailure as exc:
            errors.append(FieldError(key, exc.message))
    if errors:
        raise ValidationFailure.from_field_errors(errors)
    return accepted
