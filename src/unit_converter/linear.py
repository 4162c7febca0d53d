from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .settings import RoundingMode
from .tables import LENGTH_UNITS, MASS_UNITS, VOLUME_UNITS, UnitTable
from .validation import (
    Number,
    coerce_value,
    require_unit,
    resolve_rounding,
    round_value,
    validate_decimal_places,
)

logger = logging.getLogger(__name__)


def convert_linear(
    table: UnitTable,
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    """Convert ``value`` between two units of ``table`` via its base unit.

    Checks run in order: value, source unit, destination unit, decimal
    places, so a call with two bad units reports the source.
    """

    domain = table.domain.value
    numeric = coerce_value(value)
    require_unit(from_unit, table.factors, side="source", domain=domain)
    require_unit(to_unit, table.factors, side="destination", domain=domain)
    places = validate_decimal_places(decimal_places)
    mode = resolve_rounding(rounding)

    base_value = numeric * table.factor_for(from_unit)
    result = base_value / table.factor_for(to_unit)

    rounded = round_value(result, places, mode)
    logger.debug(
        "converted %s %s -> %s (%d places, %s)",
        domain,
        from_unit,
        to_unit,
        places,
        mode.value,
    )
    return rounded


def convert_length(
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    return convert_linear(
        LENGTH_UNITS, value, from_unit, to_unit, decimal_places, rounding=rounding
    )


def convert_mass(
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    return convert_linear(
        MASS_UNITS, value, from_unit, to_unit, decimal_places, rounding=rounding
    )


def convert_volume(
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    return convert_linear(
        VOLUME_UNITS, value, from_unit, to_unit, decimal_places, rounding=rounding
    )
