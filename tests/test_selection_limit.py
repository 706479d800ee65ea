"""
Tests for selection-limit clamping and validation.

Date: 2026-10-19
"""

import pytest

from artgrid.core.errors import InvalidLimitError
from artgrid.core.selection_limit import (
    clamp_selection_limit,
    coerce_limit,
    limit_bounds,
    validate_selection_limit,
)


def test_limit_bounds():
    assert limit_bounds(97) == (1, 97)
    assert limit_bounds(0) == (1, 1)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(5, 5), (0, 1), (-3, 1), (97, 97), (500, 97), ("12", 12), (" 7 ", 7), (4.9, 4), ("3.5", 3)],
)
def test_clamp(value, expected):
    assert clamp_selection_limit(value, 97) == expected


def test_clamp_with_no_records():
    assert clamp_selection_limit(10, 0) == 1


@pytest.mark.parametrize("value", ["abc", "", None, True, float("nan"), float("inf"), [5]])
def test_clamp_rejects_non_numbers(value):
    with pytest.raises(InvalidLimitError):
        clamp_selection_limit(value, 97)


def test_validate_accepts_in_range():
    assert validate_selection_limit("20", 97) == 20


@pytest.mark.parametrize("value", [0, 98, -1])
def test_validate_rejects_out_of_range(value):
    with pytest.raises(InvalidLimitError) as exc_info:
        validate_selection_limit(value, 97)

    assert exc_info.value.minimum == 1
    assert exc_info.value.maximum == 97
    assert exc_info.value.value == value


def test_invalid_limit_is_value_error():
    with pytest.raises(ValueError):
        coerce_limit("twelve", 97)
