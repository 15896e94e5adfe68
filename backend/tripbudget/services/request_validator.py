"""Request validation — strict completeness and numeric checks for estimate requests."""

from typing import Any

from tripbudget.data.pricing import MAX_DAYS, MAX_PEOPLE
from tripbudget.exceptions import TripRequestValidationError
from tripbudget.schemas.budget import TripRequest

REQUIRED_FIELDS: tuple[str, ...] = ("destination", "travelStyle", "travelMode", "people", "days")
TEXT_FIELDS: tuple[str, ...] = ("destination", "travelStyle", "travelMode")
NUMERIC_LIMITS: dict[str, int] = {"people": MAX_PEOPLE, "days": MAX_DAYS}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def coerce_positive_int(value: Any, maximum: int | None = None) -> int | None:
    """
    Coerce a number-like value to a positive integer no larger than ``maximum``.

    Accepts ints, integral floats and numeric strings of integral value.
    Returns None for booleans, fractions, zero, negatives, non-numbers and
    values above ``maximum``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, (float, str)):
        try:
            as_float = float(value)
        except ValueError:
            return None
        if not as_float.is_integer():
            return None
        number = int(as_float)
    else:
        return None
    if number < 1 or (maximum is not None and number > maximum):
        return None
    return number


def validate_trip_request(payload: dict[str, Any]) -> TripRequest:
    """Build a TripRequest or raise TripRequestValidationError.

    Every missing field is reported at once; value checks only run when
    nothing is missing.
    """
    missing = [field for field in REQUIRED_FIELDS if _is_blank(payload.get(field))]
    if missing:
        raise TripRequestValidationError("Missing required fields", fields=missing, received=payload)

    numbers = {field: coerce_positive_int(payload[field], limit) for field, limit in NUMERIC_LIMITS.items()}
    invalid = [field for field in TEXT_FIELDS if not isinstance(payload[field], str)]
    invalid += [field for field, number in numbers.items() if number is None]
    if invalid:
        raise TripRequestValidationError("Invalid field values", fields=invalid, received=payload)

    return TripRequest(
        destination=payload["destination"].strip(),
        travel_style=payload["travelStyle"].strip(),
        travel_mode=payload["travelMode"].strip(),
        people=numbers["people"],
        days=numbers["days"],
    )
