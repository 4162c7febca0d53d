from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Collection, Optional, Union

import numpy as np

from .errors import InvalidInputError, UnsupportedUnitError
from .settings import RoundingMode, _canonical_rounding, get_settings

Number = Union[float, np.ndarray]

_DECIMAL_ROUNDING = {
    RoundingMode.half_away_from_zero: ROUND_HALF_UP,
    RoundingMode.half_even: ROUND_HALF_EVEN,
}


def _coerce_array(values: np.ndarray) -> np.ndarray:
    if values.dtype == np.bool_ or not (
        np.issubdtype(values.dtype, np.integer)
        or np.issubdtype(values.dtype, np.floating)
    ):
        raise InvalidInputError(value=values)

    out = values.astype(np.float64)
    if not np.all(np.isfinite(out)):
        raise InvalidInputError(value=values)
    return out


def coerce_value(value: Any) -> Number:
    """Return ``value`` as a finite float (or float64 array).

    Numeric strings are accepted; bools, NaN and infinities are not.
    """

    if isinstance(value, np.ndarray):
        return _coerce_array(value)
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(value=value)

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidInputError(value=value) from None
    elif isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            raise InvalidInputError(value=value) from None
    else:
        raise InvalidInputError(value=value)

    if not math.isfinite(number):
        raise InvalidInputError(value=value)
    return number


def require_unit(
    symbol: Any, units: Collection[str], *, side: str, domain: str
) -> str:
    if not isinstance(symbol, str) or symbol not in units:
        raise UnsupportedUnitError(symbol, side=side, domain=domain)
    return symbol


def validate_decimal_places(decimal_places: Any) -> int:
    if isinstance(decimal_places, (bool, np.bool_)) or not isinstance(
        decimal_places, numbers.Integral
    ):
        raise InvalidInputError(
            f"decimal_places must be an integer, got {decimal_places!r}",
            value=decimal_places,
        )
    return int(decimal_places)


def resolve_rounding(rounding: Optional[Union[RoundingMode, str]]) -> RoundingMode:
    if rounding is None:
        return get_settings().rounding
    if isinstance(rounding, RoundingMode):
        return rounding
    try:
        return _canonical_rounding(rounding)
    except ValueError as exc:
        raise ValueError(f"Unsupported rounding mode: {rounding!r}") from exc


def _round_scalar(value: float, decimal_places: int, mode: RoundingMode) -> float:
    if not math.isfinite(value):
        return float(value)
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # quantize fails once the coefficient outgrows the context precision
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=_DECIMAL_ROUNDING[mode])
    return float(rounded)


def round_value(value: Number, decimal_places: int, mode: RoundingMode) -> Number:
    """Round to ``decimal_places`` using the decimal repr of the float.

    Working on the shortest repr keeps ``2.675`` rounding to ``2.68`` under
    half-away-from-zero, where binary rounding would give ``2.67``.
    Negative ``decimal_places`` rounds to tens, hundreds and so on.
    """

    if isinstance(value, np.ndarray):
        rounder = np.vectorize(
            lambda item: _round_scalar(item, decimal_places, mode),
            otypes=[np.float64],
        )
        return rounder(value)
    return _round_scalar(value, decimal_places, mode)
