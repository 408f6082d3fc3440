"""Display ordering for expanded conversions."""

from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

from .converter import ConversionResult, resolve_category
from .units import Category

_UNRANKED = 999

PRIORITY_UNITS: Mapping[Category, Mapping[str, int]] = {
    Category.LENGTH: {"m": 1, "ft": 2, "in": 3, "cm": 4, "km": 5, "mi": 6, "mm": 7, "yd": 8},
    Category.WEIGHT: {"kg": 1, "lb": 2, "g": 3, "oz": 4, "mg": 5, "ton": 6},
    Category.TEMPERATURE: {"fahrenheit": 1, "celsius": 1, "kelvin": 3},
    Category.VOLUME: {"l": 1, "gal": 2, "ml": 3, "cup": 4, "pint": 5, "quart": 6},
    Category.SPEED: {"kmh": 1, "mph": 2, "ms": 3, "knots": 4},
    Category.DATA: {"mb": 1, "gb": 2, "kb": 3, "byte": 4, "tb": 5, "bit": 6},
    Category.TIME: {
        "minute": 1,
        "hour": 2,
        "day": 3,
        "second": 4,
        "week": 5,
        "month": 6,
        "year": 7,
    },
    Category.AREA: {"m2": 1, "ft2": 2, "km2": 3, "acre": 4, "hectare": 5},
    Category.PRESSURE: {"psi": 1, "bar": 2, "pa": 3, "atm": 4, "mmhg": 5},
    Category.ENERGY: {"j": 1, "cal": 2, "kcal": 3, "kwh": 4, "btu": 5},
}


def priority(category: Category | str, unit_code: str) -> int:
    return PRIORITY_UNITS.get(resolve_category(category), {}).get(unit_code, _UNRANKED)


def rank_conversions(
    results: Sequence[ConversionResult], category: Category | str
) -> List[ConversionResult]:
    """Order ``results`` by the category's priority table.

    The sort is stable, so units sharing a rank keep their incoming order.
    """

    resolved = resolve_category(category)
    return sorted(results, key=lambda result: priority(resolved, result.unit_code))


def split_top(
    results: Sequence[ConversionResult], count: int = 3
) -> Tuple[List[ConversionResult], List[ConversionResult]]:
    count = max(count, 0)
    return list(results[:count]), list(results[count:])


__all__ = ["PRIORITY_UNITS", "priority", "rank_conversions", "split_top"]
