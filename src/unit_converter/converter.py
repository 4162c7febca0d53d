from __future__ import annotations

from typing import Any, Callable, Final, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .linear import convert_length, convert_mass, convert_volume
from .settings import RoundingMode
from .tables import LINEAR_TABLES, TEMPERATURE_UNITS, Domain
from .temperature import convert_temperature
from .validation import Number

_OPERATIONS: Final[dict[Domain, Callable[..., Number]]] = {
    Domain.length: convert_length,
    Domain.mass: convert_mass,
    Domain.volume: convert_volume,
    Domain.temperature: convert_temperature,
}


class ConversionRequest(BaseModel):
    """A single conversion call; the value is validated when it runs."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    domain: Domain
    value: Any
    from_unit: str
    to_unit: str
    decimal_places: int = Field(default=2, strict=True)


def _resolve_domain(domain: Union[Domain, str]) -> Domain:
    try:
        return Domain(domain)
    except ValueError:
        supported = ", ".join(item.value for item in Domain)
        raise ValueError(
            f"Unknown domain {domain!r}; expected one of: {supported}"
        ) from None


def supported_units(domain: Union[Domain, str]) -> tuple[str, ...]:
    resolved = _resolve_domain(domain)
    if resolved is Domain.temperature:
        return TEMPERATURE_UNITS
    return LINEAR_TABLES[resolved].symbols


def convert(
    domain: Union[Domain, str],
    value: Any,
    from_unit: str,
    to_unit: str,
    decimal_places: int = 2,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    operation = _OPERATIONS[_resolve_domain(domain)]
    return operation(value, from_unit, to_unit, decimal_places, rounding=rounding)


def convert_request(
    request: ConversionRequest,
    *,
    rounding: Optional[Union[RoundingMode, str]] = None,
) -> Number:
    return convert(
        request.domain,
        request.value,
        request.from_unit,
        request.to_unit,
        request.decimal_places,
        rounding=rounding,
    )
