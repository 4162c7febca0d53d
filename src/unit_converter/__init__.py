"""Unit conversion for length, mass, volume and temperature."""

from .converter import ConversionRequest, convert, convert_request, supported_units
from .errors import InvalidInputError, UnitConversionError, UnsupportedUnitError
from .linear import convert_length, convert_linear, convert_mass, convert_volume
from .settings import ConverterSettings, RoundingMode, get_settings
from .tables import (
    LENGTH_UNITS,
    MASS_UNITS,
    TEMPERATURE_UNITS,
    VOLUME_UNITS,
    Domain,
    UnitTable,
)
from .temperature import TEMPERATURE_FORMULAS, convert_temperature

__all__ = [
    "ConversionRequest",
    "ConverterSettings",
    "Domain",
    "InvalidInputError",
    "LENGTH_UNITS",
    "MASS_UNITS",
    "RoundingMode",
    "TEMPERATURE_FORMULAS",
    "TEMPERATURE_UNITS",
    "UnitConversionError",
    "UnitTable",
    "UnsupportedUnitError",
    "VOLUME_UNITS",
    "convert",
    "convert_length",
    "convert_linear",
    "convert_mass",
    "convert_request",
    "convert_temperature",
    "convert_volume",
    "get_settings",
    "supported_units",
]
