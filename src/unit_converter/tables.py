from __future__ import annotations

import math
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, model_validator


class Domain(str, Enum):
    length = "length"
    mass = "mass"
    volume = "volume"
    temperature = "temperature"


class UnitTable(BaseModel):
    """Factors converting one unit of each symbol into the domain's base unit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    domain: Domain
    base_unit: str
    factors: dict[str, float]

    @model_validator(mode="after")
    def _validate_factors(self) -> "UnitTable":
        for symbol, factor in self.factors.items():
            if symbol.strip() == "" or symbol != symbol.strip():
                raise ValueError(f"invalid unit symbol {symbol!r}")
            if not math.isfinite(float(factor)) or factor <= 0:
                raise ValueError(f"factor for {symbol} must be a finite number > 0")

        if self.base_unit not in self.factors:
            raise ValueError(f"base unit {self.base_unit} missing from {self.domain.value}")
        if self.factors[self.base_unit] != 1:
            raise ValueError(f"base unit {self.base_unit} must have factor 1")
        return self

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(self.factors)

    def factor_for(self, symbol: str) -> float:
        return self.factors[symbol]


LENGTH_UNITS: Final[UnitTable] = UnitTable(
    domain=Domain.length,
    base_unit="m",
    factors={
        "m": 1,
        "km": 1000,
        "cm": 0.01,
        "mm": 0.001,
        "µm": 1e-6,
        "nm": 1e-9,
        "mi": 1609.344,
        "yd": 0.9144,
        "ft": 0.3048,
        "in": 0.0254,
    },
)

MASS_UNITS: Final[UnitTable] = UnitTable(
    domain=Domain.mass,
    base_unit="g",
    factors={
        "kg": 1000,
        "g": 1,
        "mg": 0.001,
        "t": 1000000,
        "lb": 453.59237,
        "oz": 28.3495231,
    },
)

# oz here is a fluid measure, unrelated to MASS_UNITS["oz"].
VOLUME_UNITS: Final[UnitTable] = UnitTable(
    domain=Domain.volume,
    base_unit="l",
    factors={
        "l": 1,
        "ml": 0.001,
        "gal": 4.546,
        "cup": 0.237,
        "oz": 0.028,
        "m³": 1.000,
    },
)

TEMPERATURE_UNITS: Final[tuple[str, ...]] = ("C", "F", "K", "R")

LINEAR_TABLES: Final[dict[Domain, UnitTable]] = {
    Domain.length: LENGTH_UNITS,
    Domain.mass: MASS_UNITS,
    Domain.volume: VOLUME_UNITS,
}
