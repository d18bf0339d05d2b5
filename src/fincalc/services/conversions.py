"""Currency and unit conversion.

Exchange rates are fixed reference values, not live quotes.
"""

from __future__ import annotations

from dataclasses import dataclass

# Value of one unit of each currency in US dollars.
USD_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.08,
    "GBP": 1.27,
    "JPY": 0.0067,
    "CAD": 0.74,
    "AUD": 0.66,
    "CHF": 1.11,
    "CNY": 0.14,
    "INR": 0.012,
    "KRW": 0.00076,
}

CURRENCY_NAMES: dict[str, str] = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "CAD": "Canadian Dollar",
    "AUD": "Australian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Yuan",
    "INR": "Indian Rupee",
    "KRW": "South Korean Won",
}


def _rate(code: str) -> float:
    try:
        return USD_RATES[code.strip().upper()]
    except KeyError:
        raise ValueError(f"Unsupported currency: {code!r}") from None


def exchange_rate(from_code: str, to_code: str) -> float:
    """Units of ``to_code`` per one unit of ``from_code``."""
    return _rate(from_code) / _rate(to_code)


def convert_currency(amount: float, from_code: str, to_code: str) -> float:
    """Convert via USD; non-positive amounts convert to 0."""
    if amount <= 0:
        return 0.0
    return amount * _rate(from_code) / _rate(to_code)


@dataclass(frozen=True, slots=True)
class Unit:
    name: str
    symbol: str
    factor: float  # base units per one of this unit


# Base units: meter, kilogram, liter, square meter, meter/second.
UNITS: dict[str, tuple[Unit, ...]] = {
    "length": (
        Unit("Millimeter", "mm", 0.001),
        Unit("Centimeter", "cm", 0.01),
        Unit("Meter", "m", 1.0),
        Unit("Kilometer", "km", 1000.0),
        Unit("Inch", "in", 0.0254),
        Unit("Foot", "ft", 0.3048),
        Unit("Yard", "yd", 0.9144),
        Unit("Mile", "mi", 1609.344),
    ),
    "weight": (
        Unit("Gram", "g", 0.001),
        Unit("Kilogram", "kg", 1.0),
        Unit("Ounce", "oz", 0.0283495),
        Unit("Pound", "lb", 0.453592),
        Unit("Stone", "st", 6.35029),
        Unit("Ton (Metric)", "t", 1000.0),
        Unit("Ton (US)", "ton", 907.185),
    ),
    "volume": (
        Unit("Milliliter", "ml", 0.001),
        Unit("Liter", "L", 1.0),
        Unit("Fluid Ounce", "fl oz", 0.0295735),
        Unit("Cup", "cup", 0.236588),
        Unit("Pint", "pt", 0.473176),
        Unit("Quart", "qt", 0.946353),
        Unit("Gallon", "gal", 3.78541),
    ),
    "area": (
        Unit("Square Meter", "m²", 1.0),
        Unit("Square Kilometer", "km²", 1_000_000.0),
        Unit("Square Foot", "ft²", 0.092903),
        Unit("Square Yard", "yd²", 0.836127),
        Unit("Acre", "acre", 4046.86),
        Unit("Hectare", "ha", 10_000.0),
    ),
    "speed": (
        Unit("Meter/Second", "m/s", 1.0),
        Unit("Kilometer/Hour", "km/h", 1 / 3.6),
        Unit("Mile/Hour", "mph", 0.44704),
        Unit("Knot", "kn", 0.514444),
        Unit("Foot/Second", "ft/s", 0.3048),
    ),
}

TEMPERATURE_UNITS = {
    "C": ("celsius", "°c", "c"),
    "F": ("fahrenheit", "°f", "f"),
    "K": ("kelvin", "k"),
}

CATEGORIES = tuple(UNITS) + ("temperature",)


def find_unit(category: str, unit: str) -> Unit:
    """Look a unit up by name or symbol, case-insensitively."""

    try:
        units = UNITS[category]
    except KeyError:
        raise ValueError(f"Unknown unit category: {category!r}") from None
    wanted = unit.strip().lower()
    for candidate in units:
        if wanted in (candidate.name.lower(), candidate.symbol.lower()):
            return candidate
    raise ValueError(f"Unknown {category} unit: {unit!r}")


def _to_kelvin(value: float, unit: str) -> float:
    if unit == "C":
        return value + 273.15
    if unit == "F":
        return (value - 32) * 5 / 9 + 273.15
    return value


def _from_kelvin(value: float, unit: str) -> float:
    if unit == "C":
        return value - 273.15
    if unit == "F":
        return (value - 273.15) * 9 / 5 + 32
    return value


def _temperature_code(unit: str) -> str:
    """Map a temperature name or symbol to C, F or K."""

    wanted = unit.strip().lower()
    for code, aliases in TEMPERATURE_UNITS.items():
        if wanted in aliases:
            return code
    raise ValueError(f"Unknown temperature unit: {unit!r}")


def convert_unit(value: float, category: str, from_unit: str, to_unit: str) -> float:
    """Convert ``value`` through the category's base unit."""

    if category == "temperature":
        return _from_kelvin(
            _to_kelvin(value, _temperature_code(from_unit)), _temperature_code(to_unit)
        )
    source = find_unit(category, from_unit)
    target = find_unit(category, to_unit)
    return value * source.factor / target.factor


__all__ = [
    "CATEGORIES",
    "CURRENCY_NAMES",
    "UNITS",
    "USD_RATES",
    "Unit",
    "convert_currency",
    "convert_unit",
    "exchange_rate",
    "find_unit",
]
