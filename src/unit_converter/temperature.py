from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Optional, Union

from .settings import RoundingMode
from .tables import TEMPERATURE_UNITS, Domain
from .validation import (
    Number,
    coerce_value,
    require_unit,
    resolve_rounding,
    round_value,
    validate_decimal_places,
)

logger = logging.getLogger(__name__)

Formula = Callable[[Number], Number]

# Operand order is significant for float results; keep each formula as written.
TEMPERATURE_FORMULAS: Final[Mapping[tuple[str, str], Formula]] = MappingProxyType(
    {
        ("C", "C"): lambda v: v,
        ("C", "F"): lambda v: v * 1.8 + 32,
        ("C", "K"): lambda v: v + 273.15,
        ("C", "R"): lambda v: v * 0.8,
        ("F", "C"): lambda v: (v - 32) * (5 / 9),
        ("F", "F"): lambda v: v,
        ("F", "K"): lambda v: (v - 32) * (5 / 9) + 273.15,
        ("F", "R"): lambda v: (v - 32) * (4 / 9),
        ("K", "C"): lambda v: v - 273.15,
        ("K", "F"): lambda v: (v - 273.15) * 1.8 + 32,
        ("K", "K"): lambda v: v,
        ("K", "R"): lambda v: (v - 273.15) * 4 / 5,
        ("R", "C"): lambda v: v * 1.25,
        ("R", "F"): lambda v: v * 2.25 + 32,
        ("R", "K"): lambda v: v * 1.25 + 273.15,
        ("R", "R"): lambda v: v,
    }
)


def convert_temperature(
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    """Convert between Celsius (C), Fahrenheit (F), Kelvin (K) and Réaumur (R)."""

    domain = Domain.temperature.value
    numeric = coerce_value(value)
    require_unit(from_unit, TEMPERATURE_UNITS, side="source", domain=domain)
    require_unit(to_unit, TEMPERATURE_UNITS, side="destination", domain=domain)
    places = validate_decimal_places(decimal_places)
    mode = resolve_rounding(rounding)

    formula = TEMPERATURE_FORMULAS[(from_unit, to_unit)]
    rounded = round_value(formula(numeric), places, mode)
    logger.debug(
        "converted %s %s -> %s (%d places, %s)",
        domain,
        from_unit,
        to_unit,
        places,
        mode.value,
    )
    return rounded
