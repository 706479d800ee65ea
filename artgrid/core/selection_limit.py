"""Module: selection_limit.py

Date: 2026-10-19

Selection-limit input handling.

The bulk selection limit typed by the user must lie in [1, total records]
before it reaches the reconciler. clamp_selection_limit pulls out-of-range
numbers back into range; validate_selection_limit rejects them instead.
Both reject input that is not a number at all.
"""

from typing import Any

from artgrid.config import MIN_SELECTION_LIMIT
from artgrid.core.errors import InvalidLimitError


def limit_bounds(total_records: int) -> tuple[int, int]:
    """Allowed (minimum, maximum) limit. With no records known the range is [1, 1]."""
    return MIN_SELECTION_LIMIT, max(MIN_SELECTION_LIMIT, total_records)


def coerce_limit(value: Any, total_records: int) -> int:
    """Turn spin-box or text input into an int.

    Floats are truncated; numeric strings are parsed.

    Raises:
        InvalidLimitError: if the value is not a number

    """
    minimum, maximum = limit_bounds(total_records)

    if isinstance(value, bool):
        raise InvalidLimitError(value, minimum, maximum)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise InvalidLimitError(value, minimum, maximum)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                return coerce_limit(float(text), total_records)
            except ValueError:
                raise InvalidLimitError(value, minimum, maximum) from None

    raise InvalidLimitError(value, minimum, maximum)


def clamp_selection_limit(value: Any, total_records: int) -> int:
    """Clamp `value` into [1, max(1, total_records)].

    Raises:
        InvalidLimitError: if the value is not a number

    """
    minimum, maximum = limit_bounds(total_records)
    number = coerce_limit(value, total_records)
    return min(max(number, minimum), maximum)


def validate_selection_limit(value: Any, total_records: int) -> int:
    """Return `value` as an int if it lies in [1, max(1, total_records)].

    Raises:
        InvalidLimitError: if the value is not a number or is out of range

    """
    minimum, maximum = limit_bounds(total_records)
    number = coerce_limit(value, total_records)
    if not minimum <= number <= maximum:
        raise InvalidLimitError(value, minimum, maximum)
    return number
