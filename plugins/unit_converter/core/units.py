"""Static category and unit tables shared by the converter and the detector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .registry import to_unit


class Category(str, Enum):
    """Closed set of quantity categories."""

    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    AREA = "area"
    SPEED = "speed"
    DATA = "data"
    TIME = "time"
    PRESSURE = "pressure"
    ENERGY = "energy"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A convertible unit.

    ``quantity`` is the Pint expression the unit resolves to; conversions
    always pivot through the category's base unit.
    """

    code: str
    category: Category
    label: str
    display_name: str
    quantity: str

    def to_base(self, value: float) -> float:
        return to_unit(value, self.quantity, BASE_UNITS[self.category].quantity)

    def from_base(self, value: float) -> float:
        return to_unit(value, BASE_UNITS[self.category].quantity, self.quantity)

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "label": self.label,
            "display_name": self.display_name,
            "base": BASE_UNIT_CODES[self.category] == self.code,
        }


def _units(category: Category, *rows: tuple[str, str, str, str]) -> tuple[UnitDefinition, ...]:
    return tuple(UnitDefinition(code, category, label, name, qty) for code, label, name, qty in rows)


_TABLE: dict[Category, tuple[UnitDefinition, ...]] = {
    Category.LENGTH: _units(
        Category.LENGTH,
        ("mm", "millimeters", "Millimeters", "millimeter"),
        ("cm", "centimeters", "Centimeters", "centimeter"),
        ("m", "meters", "Meters", "meter"),
        ("km", "kilometers", "Kilometers", "kilometer"),
        ("in", "inches", "Inches", "inch"),
        ("ft", "feet", "Feet", "foot"),
        ("yd", "yards", "Yards", "yard"),
        ("mi", "miles", "Miles", "mile"),
    ),
    Category.WEIGHT: _units(
        Category.WEIGHT,
        ("mg", "milligrams", "Milligrams", "milligram"),
        ("g", "grams", "Grams", "gram"),
        ("kg", "kilograms", "Kilograms", "kilogram"),
        ("oz", "ounces", "Ounces", "ounce"),
        ("lb", "pounds", "Pounds", "pound"),
        ("ton", "tons", "Tons", "metric_ton"),
    ),
    Category.TEMPERATURE: _units(
        Category.TEMPERATURE,
        ("celsius", "°C", "Celsius", "degree_Celsius"),
        ("fahrenheit", "°F", "Fahrenheit", "degree_Fahrenheit"),
        ("kelvin", "K", "Kelvin", "kelvin"),
    ),
    Category.VOLUME: _units(
        Category.VOLUME,
        ("ml", "milliliters", "Milliliters", "milliliter"),
        ("l", "liters", "Liters", "liter"),
        ("gal", "gallons", "Gallons", "gallon"),
        ("cup", "cups", "Cups", "cup"),
        ("pint", "pints", "Pints", "pint"),
        ("quart", "quarts", "Quarts", "quart"),
    ),
    Category.AREA: _units(
        Category.AREA,
        ("m2", "m²", "Square Meters", "meter ** 2"),
        ("km2", "km²", "Square Kilometers", "kilometer ** 2"),
        ("ft2", "ft²", "Square Feet", "foot ** 2"),
        ("acre", "acres", "Acres", "acre"),
        ("hectare", "hectares", "Hectares", "hectare"),
    ),
    Category.SPEED: _units(
        Category.SPEED,
        ("ms", "m/s", "Meters/Second", "meter / second"),
        ("kmh", "km/h", "Kilometers/Hour", "kilometer / hour"),
        ("mph", "mph", "Miles/Hour", "mile / hour"),
        ("knots", "knots", "Knots", "knot"),
    ),
    Category.DATA: _units(
        Category.DATA,
        ("bit", "bits", "Bits", "bit"),
        ("byte", "bytes", "Bytes", "byte"),
        ("kb", "KB", "Kilobytes", "kibibyte"),
        ("mb", "MB", "Megabytes", "mebibyte"),
        ("gb", "GB", "Gigabytes", "gibibyte"),
        ("tb", "TB", "Terabytes", "tebibyte"),
    ),
    Category.TIME: _units(
        Category.TIME,
        ("second", "seconds", "Seconds", "second"),
        ("minute", "minutes", "Minutes", "minute"),
        ("hour", "hours", "Hours", "hour"),
        ("day", "days", "Days", "day"),
        ("week", "weeks", "Weeks", "week"),
        ("month", "months", "Months", "commercial_month"),
        ("year", "years", "Years", "commercial_year"),
    ),
    Category.PRESSURE: _units(
        Category.PRESSURE,
        ("pa", "Pa", "Pascals", "pascal"),
        ("bar", "bar", "Bar", "bar"),
        ("psi", "PSI", "PSI", "psi"),
        ("atm", "atm", "Atmospheres", "atmosphere"),
        ("mmhg", "mmHg", "mmHg", "millimeter_Hg"),
    ),
    Category.ENERGY: _units(
        Category.ENERGY,
        ("j", "joules", "Joules", "joule"),
        ("cal", "calories", "Calories", "calorie"),
        ("kcal", "kilocalories", "Kilocalories", "kilocalorie"),
        ("btu", "BTU", "BTU", "british_thermal_unit"),
        ("kwh", "kWh", "kWh", "kilowatt_hour"),
    ),
}

BASE_UNIT_CODES: Mapping[Category, str] = MappingProxyType(
    {
        Category.LENGTH: "m",
        Category.WEIGHT: "kg",
        Category.TEMPERATURE: "celsius",
        Category.VOLUME: "l",
        Category.AREA: "m2",
        Category.SPEED: "ms",
        Category.DATA: "byte",
        Category.TIME: "second",
        Category.PRESSURE: "pa",
        Category.ENERGY: "j",
    }
)

UNIT_TABLE: Mapping[Category, Mapping[str, UnitDefinition]] = MappingProxyType(
    {
        category: MappingProxyType({unit.code: unit for unit in units})
        for category, units in _TABLE.items()
    }
)

BASE_UNITS: Mapping[Category, UnitDefinition] = MappingProxyType(
    {category: UNIT_TABLE[category][code] for category, code in BASE_UNIT_CODES.items()}
)


__all__ = ["Category", "UnitDefinition", "UNIT_TABLE", "BASE_UNITS", "BASE_UNIT_CODES"]
