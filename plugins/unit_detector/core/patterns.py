"""Ordered unit-token patterns used to find quantities in free text.

Patterns are listed in priority order. When two patterns match at the same
offset the earlier one wins, so compound units (``km/h``, ``m²``, ``mm Hg``,
``pounds per square inch``) sit ahead of the simple units they contain, and
longer spellings sit ahead of their abbreviations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern

from plugins.unit_converter.core.units import Category

NUMBER = r"(?<![\w.])(?P<value>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)"
BOUNDARY = r"(?!\w)"
NOT_PER_HOUR = r"(?!\s*/\s*h)"


@dataclass(frozen=True, slots=True)
class UnitPattern:
    """A compiled ``<number><space?><unit token>`` matcher for one unit code."""

    category: Category
    unit_code: str
    regex: Pattern[str]
    scale: float = 1.0


def _pattern(
    category: Category,
    unit_code: str,
    token: str,
    *,
    guard: str = "",
    scale: float = 1.0,
) -> UnitPattern:
    source = rf"{NUMBER}\s*(?P<unit>{token}){BOUNDARY}{guard}"
    return UnitPattern(category, unit_code, re.compile(source, re.IGNORECASE), scale)


_METERS = r"met(?:er|re)s?"
_KILOMETERS = r"kilomet(?:er|re)s?"

UNIT_PATTERNS: tuple[UnitPattern, ...] = (
    # speed
    _pattern(Category.SPEED, "kmh", rf"km\s*/\s*(?:hour|hr?)|kmh|kph|{_KILOMETERS}\s+per\s+hour"),
    _pattern(Category.SPEED, "mph", r"mph|mi\s*/\s*(?:hour|hr?)|miles?\s+per\s+hour"),
    _pattern(Category.SPEED, "ms", rf"m\s*/\s*s|{_METERS}\s+per\s+second"),
    _pattern(Category.SPEED, "knots", r"knots?|kts?"),
    # area
    _pattern(Category.AREA, "m2", rf"m²|m\^?2|sq\.?\s*(?:{_METERS}|m)|square\s+{_METERS}"),
    _pattern(
        Category.AREA,
        "km2",
        rf"km²|km\^?2|sq\.?\s*(?:{_KILOMETERS}|km)|square\s+{_KILOMETERS}",
    ),
    _pattern(Category.AREA, "ft2", r"ft²|ft\^?2|sq\.?\s*(?:feet|foot|ft)|square\s+f(?:ee|oo)t"),
    _pattern(Category.AREA, "hectare", r"hectares?|ha"),
    _pattern(Category.AREA, "acre", r"acres?"),
    # pressure
    _pattern(Category.PRESSURE, "psi", r"psi|pounds?\s+per\s+square\s+inch"),
    _pattern(Category.PRESSURE, "bar", r"millibars?|mbar", scale=1e-3),
    _pattern(Category.PRESSURE, "bar", r"bars?"),
    _pattern(Category.PRESSURE, "atm", r"atmospheres?|atm"),
    _pattern(Category.PRESSURE, "mmhg", r"mm\s*hg|millimet(?:er|re)s?\s+of\s+mercury"),
    _pattern(Category.PRESSURE, "pa", r"kilopascals?|(?-i:kPa)", scale=1e3),
    _pattern(Category.PRESSURE, "pa", r"hectopascals?|(?-i:hPa)", scale=1e2),
    _pattern(Category.PRESSURE, "pa", r"pascals?|(?-i:Pa)"),
    # length
    _pattern(Category.LENGTH, "mm", r"millimet(?:er|re)s?|mm"),
    _pattern(Category.LENGTH, "cm", r"centimet(?:er|re)s?|cm"),
    _pattern(Category.LENGTH, "km", rf"{_KILOMETERS}|km", guard=NOT_PER_HOUR),
    _pattern(Category.LENGTH, "m", rf"{_METERS}|(?-i:m)", guard=r"(?![²³/])"),
    _pattern(Category.LENGTH, "in", r"inch(?:es)?|in"),
    _pattern(Category.LENGTH, "ft", r"feet|foot|ft"),
    _pattern(Category.LENGTH, "yd", r"yards?|yds?"),
    _pattern(Category.LENGTH, "mi", r"miles?|mi", guard=NOT_PER_HOUR),
    # weight
    _pattern(Category.WEIGHT, "mg", r"milligrams?|mg"),
    _pattern(Category.WEIGHT, "kg", r"kilograms?|kilos?|kgs?"),
    _pattern(Category.WEIGHT, "g", r"grams?|(?-i:g)"),
    _pattern(Category.WEIGHT, "oz", r"ounces?|oz"),
    _pattern(Category.WEIGHT, "lb", r"pounds?|lbs?"),
    _pattern(Category.WEIGHT, "ton", r"tonnes?|tons?"),
    # temperature
    _pattern(
        Category.TEMPERATURE,
        "celsius",
        r"°\s*C(?:elsius)?|℃|(?:degrees?\s+)?celsius|degrees?\s+C",
    ),
    _pattern(
        Category.TEMPERATURE,
        "fahrenheit",
        r"°\s*F(?:ahrenheit)?|℉|(?:degrees?\s+)?fahrenheit|degrees?\s+F",
    ),
    _pattern(Category.TEMPERATURE, "kelvin", r"kelvins?|(?-i:K)"),
    # volume
    _pattern(Category.VOLUME, "ml", r"millilit(?:er|re)s?|ml"),
    _pattern(Category.VOLUME, "l", r"lit(?:er|re)s?|l"),
    _pattern(Category.VOLUME, "gal", r"gallons?|gal"),
    _pattern(Category.VOLUME, "cup", r"cups?"),
    _pattern(Category.VOLUME, "pint", r"pints?|pt"),
    _pattern(Category.VOLUME, "quart", r"quarts?|qt"),
    # time
    _pattern(Category.TIME, "second", r"seconds?|secs?|(?-i:s)"),
    _pattern(Category.TIME, "minute", r"minutes?|mins?"),
    _pattern(Category.TIME, "hour", r"hours?|hrs?"),
    _pattern(Category.TIME, "day", r"days?"),
    _pattern(Category.TIME, "week", r"weeks?|wks?"),
    _pattern(Category.TIME, "month", r"months?"),
    _pattern(Category.TIME, "year", r"years?|yrs?"),
    # data; the case-sensitive bit spellings go first so "Gb" is not read as "gb"
    _pattern(Category.DATA, "bit", r"kilobits?|(?-i:kbit|Kbit|Kb)", scale=1e3),
    _pattern(Category.DATA, "bit", r"megabits?|(?-i:Mbit|Mb)", scale=1e6),
    _pattern(Category.DATA, "bit", r"gigabits?|(?-i:Gbit|Gb)", scale=1e9),
    _pattern(Category.DATA, "kb", r"kilobytes?|kib|kb"),
    _pattern(Category.DATA, "mb", r"megabytes?|mib|mb"),
    _pattern(Category.DATA, "gb", r"gigabytes?|gib|gb"),
    _pattern(Category.DATA, "tb", r"terabytes?|tib|tb"),
    _pattern(Category.DATA, "bit", r"bits?|(?-i:b)", guard=r"(?!yte)"),
    _pattern(Category.DATA, "byte", r"bytes?|(?-i:B)"),
    # energy
    _pattern(Category.ENERGY, "kcal", r"kilocalories?|kcals?"),
    _pattern(Category.ENERGY, "cal", r"calories?|cal"),
    _pattern(Category.ENERGY, "j", r"kilojoules?|(?-i:kJ)", scale=1e3),
    _pattern(Category.ENERGY, "j", r"joules?|(?-i:J)"),
    _pattern(Category.ENERGY, "btu", r"btus?|british\s+thermal\s+units?"),
    _pattern(Category.ENERGY, "kwh", r"kilowatt[\s-]*hours?|kwh"),
)


__all__ = ["NUMBER", "BOUNDARY", "UnitPattern", "UNIT_PATTERNS"]
