"""Facade for the unit converter core utilities."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .converter import (
    ConversionError,
    ConversionResult,
    InvalidNumberError,
    UnknownCategoryError,
    UnknownUnitError,
    base_unit,
    coerce_number,
    convert,
    expand_to_all_units,
    format_number,
    list_categories,
    list_units,
    resolve_category,
    resolve_unit,
    unit_codes,
)
from .messages import handle_message
from .ranking import PRIORITY_UNITS, rank_conversions, split_top
from .units import UNIT_TABLE, Category, UnitDefinition


def convert_and_format(
    value: float | str,
    from_unit: str,
    to_unit: str,
    category: Category | str,
    *,
    decimal_places: int = 2,
) -> Dict[str, object]:
    """Convert ``value`` between units and format the result."""

    result = convert(value, from_unit, to_unit, category)
    target = resolve_unit(to_unit, category)
    return {
        "value": result,
        "formatted": format_number(result, decimal_places),
        "unit": target.code,
        "label": target.label,
        "category": target.category.value,
    }


def expand_ranked(
    value: float | str,
    from_unit: str,
    category: Category | str,
    preferred_units: Optional[Sequence[str]] = None,
    *,
    decimal_places: int = 2,
    ranked: bool = True,
    top: int = 3,
) -> Dict[str, List[Dict[str, str]]]:
    """Expand ``value`` and split the results into headline and remaining rows."""

    results = expand_to_all_units(
        value, from_unit, category, preferred_units, decimal_places=decimal_places
    )
    if ranked:
        results = rank_conversions(results, category)
    head, rest = split_top(results, top)
    return {
        "conversions": [item.to_dict() for item in results],
        "top": [item.to_dict() for item in head],
        "more": [item.to_dict() for item in rest],
    }


__all__ = [
    "Category",
    "ConversionError",
    "ConversionResult",
    "InvalidNumberError",
    "PRIORITY_UNITS",
    "UNIT_TABLE",
    "UnitDefinition",
    "UnknownCategoryError",
    "UnknownUnitError",
    "base_unit",
    "coerce_number",
    "convert",
    "convert_and_format",
    "expand_ranked",
    "expand_to_all_units",
    "format_number",
    "handle_message",
    "list_categories",
    "list_units",
    "rank_conversions",
    "resolve_category",
    "split_top",
    "unit_codes",
]
