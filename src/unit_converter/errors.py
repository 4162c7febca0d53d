from __future__ import annotations

from typing import Any


class UnitConversionError(ValueError):
    """Base error for rejected conversion input."""


class InvalidInputError(UnitConversionError):
    """Raised when a value is not a usable finite number."""

    def __init__(
        self, message: str = "The value provided is not numerical.", *, value: Any = None
    ) -> None:
        super().__init__(message)
        self.value = value


class UnsupportedUnitError(UnitConversionError):
    """Raised when a unit symbol is not known to the requested domain."""

    def __init__(self, unit: Any, *, side: str, domain: str) -> None:
        super().__init__(
            f"{side.capitalize()} unit {unit} is not supported for {domain}"
        )
        self.unit = unit
        self.side = side
        self.domain = domain
