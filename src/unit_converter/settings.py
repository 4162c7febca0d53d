from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_UNIT_CONVERTER_PREFIX = "UNIT_CONVERTER_"


class RoundingMode(str, Enum):
    half_away_from_zero = "half_away_from_zero"
    half_even = "half_even"


def _canonical_rounding(value: Any) -> Any:
    if isinstance(value, RoundingMode) or value is None:
        return value

    normalized = str(value).strip().lower().replace("-", "_").replace(" ", "_")
    if normalized == "":
        return RoundingMode.half_away_from_zero

    aliases = {
        "half_away_from_zero": RoundingMode.half_away_from_zero,
        "half_up": RoundingMode.half_away_from_zero,
        "away_from_zero": RoundingMode.half_away_from_zero,
        "half_even": RoundingMode.half_even,
        "half_to_even": RoundingMode.half_even,
        "bankers": RoundingMode.half_even,
    }
    if normalized in aliases:
        return aliases[normalized]
    raise ValueError(
        f"Invalid {_UNIT_CONVERTER_PREFIX}ROUNDING={value!r}; "
        "expected one of: half_away_from_zero, half_even"
    )


class ConverterSettings(BaseSettings):
    rounding: RoundingMode = RoundingMode.half_away_from_zero

    model_config = SettingsConfigDict(env_prefix=_UNIT_CONVERTER_PREFIX, extra="ignore")

    @field_validator("rounding", mode="before")
    @classmethod
    def _normalize_rounding(cls, value: Any) -> Any:
        return _canonical_rounding(value)


@lru_cache
def get_settings() -> ConverterSettings:
    return ConverterSettings()
