from __future__ import annotations

import math
from decimal import Decimal

import numpy as np
import pytest

from unit_converter import InvalidInputError, RoundingMode, convert_length
from unit_converter.validation import coerce_value, resolve_rounding, round_value


def test_half_away_from_zero_uses_decimal_repr() -> None:
    mode = RoundingMode.half_away_from_zero
    assert round_value(2.675, 2, mode) == 2.68
    assert round_value(-2.675, 2, mode) == -2.68
    assert round_value(0.5, 0, mode) == 1.0
    assert round_value(-0.5, 0, mode) == -1.0


def test_half_even_breaks_ties_to_even() -> None:
    mode = RoundingMode.half_even
    assert round_value(0.5, 0, mode) == 0.0
    assert round_value(1.5, 0, mode) == 2.0
    assert round_value(2.675, 2, mode) == 2.68
    assert round_value(2.665, 2, mode) == 2.66


def test_negative_decimal_places() -> None:
    assert round_value(1234.5, -2, RoundingMode.half_away_from_zero) == 1200.0
    assert round_value(1250.0, -2, RoundingMode.half_away_from_zero) == 1300.0
    assert round_value(1250.0, -2, RoundingMode.half_even) == 1200.0


def test_large_values_round_without_overflowing_precision() -> None:
    assert round_value(1e30, 10, RoundingMode.half_away_from_zero) == 1e30
    assert round_value(1e-20, 2, RoundingMode.half_away_from_zero) == 0.0


def test_arrays_round_element_wise_like_scalars() -> None:
    values = np.array([2.675, -2.675, 0.125])
    out = round_value(values, 2, RoundingMode.half_away_from_zero)
    assert out.tolist() == [2.68, -2.68, 0.13]


def test_explicit_rounding_argument() -> None:
    assert convert_length(0.125, "m", "m", rounding=RoundingMode.half_even) == 0.12
    assert convert_length(0.125, "m", "m", rounding="half_away_from_zero") == 0.13
    with pytest.raises(ValueError, match="Unsupported rounding mode"):
        resolve_rounding("up")


def test_rounding_argument_accepts_setting_aliases() -> None:
    assert resolve_rounding("bankers") is RoundingMode.half_even
    assert resolve_rounding("half-up") is RoundingMode.half_away_from_zero
    assert convert_length(0.125, "m", "m", rounding="bankers") == 0.12


def test_overflowing_results_round_to_infinity() -> None:
    assert convert_length(1e306, "km", "m") == math.inf
    assert convert_length(-1e306, "km", "m") == -math.inf
    out = round_value(np.array([np.inf, 1.005]), 2, RoundingMode.half_away_from_zero)
    assert out.tolist() == [math.inf, 1.01]


def test_coerce_value_accepts_real_numbers() -> None:
    assert coerce_value(3) == 3.0
    assert coerce_value(Decimal("1.25")) == 1.25
    assert coerce_value("1e3") == 1000.0
    assert coerce_value(np.float32(0.5)) == 0.5


@pytest.mark.parametrize(
    "value",
    [
        np.bool_(True),
        object(),
        "nan",
        "-inf",
        np.array([True]),
        10**400,
        Decimal("sNaN"),
    ],
)
def test_coerce_value_rejects_non_numbers(value) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        coerce_value(value)
    assert str(excinfo.value) == "The value provided is not numerical."
