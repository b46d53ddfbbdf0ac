"""Conversion table: six fixed unit/currency conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

MILES_PER_KM = 0.621371  # 1 km = 0.621371 mi
RUB_PER_USD = 90  # fixed rate


class ConversionError(ValueError):
    """Base error for anything that ends up as the static error message."""


class UnknownConversionError(ConversionError):
    pass


def km_to_miles(v: float) -> float:
    return v * MILES_PER_KM


def miles_to_km(v: float) -> float:
    # divides by the same constant, not by a rounded reciprocal
    return v / MILES_PER_KM


def celsius_to_fahrenheit(v: float) -> float:
    return v * 9 / 5 + 32


def fahrenheit_to_celsius(v: float) -> float:
    return (v - 32) * 5 / 9


def rub_to_usd(v: float) -> float:
    return v / RUB_PER_USD


def usd_to_rub(v: float) -> float:
    return v * RUB_PER_USD


class Conversion(Enum):
    """One member per conversion; the value is the label shown in the selector."""

    KM_TO_MILES = "Км → Мили"
    MILES_TO_KM = "Мили → Км"
    CELSIUS_TO_FAHRENHEIT = "°C → °F"
    FAHRENHEIT_TO_CELSIUS = "°F → °C"
    RUB_TO_USD = "Руб → USD (курс 90)"
    USD_TO_RUB = "USD → Руб (курс 90)"

    @property
    def label(self) -> str:
        return self.value

    @property
    def function(self) -> Callable[[float], float]:
        return _FUNCTIONS[self][0]

    @property
    def formula(self) -> str:
        return _FUNCTIONS[self][1]

    def apply(self, v: float) -> float:
        return self.function(v)

    @classmethod
    def from_label(cls, label: str) -> "Conversion":
        try:
            return cls(label)
        except ValueError:
            raise UnknownConversionError(f"unknown conversion: {label!r}") from None


_FUNCTIONS = {
    Conversion.KM_TO_MILES: (km_to_miles, f"v × {MILES_PER_KM}"),
    Conversion.MILES_TO_KM: (miles_to_km, f"v ÷ {MILES_PER_KM}"),
    Conversion.CELSIUS_TO_FAHRENHEIT: (celsius_to_fahrenheit, "v × 9 / 5 + 32"),
    Conversion.FAHRENHEIT_TO_CELSIUS: (fahrenheit_to_celsius, "(v − 32) × 5 / 9"),
    Conversion.RUB_TO_USD: (rub_to_usd, f"v ÷ {RUB_PER_USD}"),
    Conversion.USD_TO_RUB: (usd_to_rub, f"v × {RUB_PER_USD}"),
}


@dataclass(frozen=True)
class ConversionEntry:
    label: str
    apply: Callable[[float], float]
    formula: str


# Fixed at import; enum order is display order.
TABLE: tuple[ConversionEntry, ...] = tuple(
    ConversionEntry(label=c.label, apply=c.function, formula=c.formula)
    for c in Conversion
)


def labels() -> list[str]:
    return [entry.label for entry in TABLE]


def lookup(label: str) -> Optional[Callable[[float], float]]:
    """Return the function for ``label``, or None when no entry has that label."""
    for entry in TABLE:
        if entry.label == label:
            return entry.apply
    return None
