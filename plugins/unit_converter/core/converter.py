"""Conversion and formatting utilities for the ten quantity categories."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Sequence

from common.logging import get_logger

from .units import BASE_UNIT_CODES, UNIT_TABLE, Category, UnitDefinition

logger = get_logger(__name__)


class ConversionError(ValueError):
    """Base exception for conversion failures."""


class UnknownCategoryError(ConversionError):
    """Raised when a category code is not part of the closed category set."""


class UnknownUnitError(ConversionError):
    """Raised when a unit code is not defined for an otherwise valid category."""


class InvalidNumberError(ConversionError):
    """Raised when a value is non-finite or cannot be parsed as a number."""


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """One formatted entry of an expansion."""

    formatted_value: str
    unit_label: str
    category: str
    unit_code: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "formattedValue": self.formatted_value,
            "unitLabel": self.unit_label,
            "unitCode": self.unit_code,
            "category": self.category,
        }


_SUFFIXES: tuple[tuple[float, str], ...] = ((1e12, "T"), (1e9, "B"), (1e6, "M"))


# ---- Lookup helpers -------------------------------------------------------
def resolve_category(category: Category | str) -> Category:
    """Return the :class:`Category` for an exact, lowercase category code."""

    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError as exc:
        raise UnknownCategoryError(f"Unknown category: {category}") from exc


def resolve_unit(unit: str, category: Category | str) -> UnitDefinition:
    resolved = resolve_category(category)
    definition = UNIT_TABLE[resolved].get(unit) if isinstance(unit, str) else None
    if definition is None:
        raise UnknownUnitError(f"Unknown unit in category {resolved.value}: {unit}")
    return definition


def coerce_number(value: float | int | str) -> float:
    """Return ``value`` as a finite float or raise :class:`InvalidNumberError`."""

    if isinstance(value, bool):
        raise InvalidNumberError("Value must be a number or numeric string.")
    if isinstance(value, (int, float)):
        if math.isnan(value) or math.isinf(value):
            raise InvalidNumberError("Value must be a finite number.")
        return float(value)
    if not isinstance(value, str):
        raise InvalidNumberError("Value must be a number or numeric string.")
    text = value.strip()
    if len(text) == 0 or len(text) > 64:
        raise InvalidNumberError("Enter a valid number")
    try:
        parsed = Decimal(text)
    except InvalidOperation as exc:
        raise InvalidNumberError("Enter a valid number") from exc
    if parsed.is_nan() or parsed.is_infinite():
        raise InvalidNumberError("Value must be a finite number.")
    return float(parsed)


# ---- Listing helpers ------------------------------------------------------
def list_categories() -> List[str]:
    return [category.value for category in UNIT_TABLE]


def unit_codes(category: Category | str) -> List[str]:
    return list(UNIT_TABLE[resolve_category(category)].keys())


def list_units(category: Category | str) -> List[Dict[str, object]]:
    """Return metadata for the units belonging to ``category``."""

    return [unit.to_dict() for unit in UNIT_TABLE[resolve_category(category)].values()]


def base_unit(category: Category | str) -> str:
    return BASE_UNIT_CODES[resolve_category(category)]


# ---- Conversion -----------------------------------------------------------
def convert(
    value: float | int | str,
    from_unit: str,
    to_unit: str,
    category: Category | str,
) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` via the base unit."""

    source = resolve_unit(from_unit, category)
    target = resolve_unit(to_unit, category)
    numeric = coerce_number(value)
    if source.code == target.code:
        return numeric
    return target.from_base(source.to_base(numeric))


def _target_units(
    category: Category, preferred_units: Optional[Sequence[str]]
) -> Iterable[str]:
    units = UNIT_TABLE[category]
    if not preferred_units:
        return list(units.keys())
    seen: set[str] = set()
    targets: List[str] = []
    for code in preferred_units:
        if code in units and code not in seen:
            seen.add(code)
            targets.append(code)
    return targets


def expand_to_all_units(
    value: float | int | str,
    from_unit: str,
    category: Category | str,
    preferred_units: Optional[Sequence[str]] = None,
    *,
    decimal_places: int = 2,
) -> List[ConversionResult]:
    """Convert ``value`` into every other unit of ``category``.

    When ``preferred_units`` is given, only the codes that exist in the
    category are expanded, in the caller's order. A failure converting to a
    single target drops that target instead of aborting the expansion.
    """

    resolved = resolve_category(category)
    source = resolve_unit(from_unit, resolved)
    numeric = coerce_number(value)

    results: List[ConversionResult] = []
    for code in _target_units(resolved, preferred_units):
        if code == source.code:
            continue
        try:
            target = resolve_unit(code, resolved)
            converted = convert(numeric, source.code, target.code, resolved)
            formatted = format_number(converted, decimal_places)
        except Exception as exc:  # noqa: BLE001
            logger.warning("conversion to %s failed: %s", code, exc)
            continue
        results.append(
            ConversionResult(
                formatted_value=formatted,
                unit_label=target.label,
                category=resolved.value,
                unit_code=target.code,
            )
        )
    return results


# ---- Formatting -----------------------------------------------------------
def _round_half_up(value: float, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def _exponential(value: float, places: int) -> str:
    mantissa, exponent = f"{value:.{places}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_number(value: float, decimal_places: int = 2) -> str:
    """Render ``value`` with magnitude-aware notation.

    Values below 0.01 use exponential notation, large values get a
    ``T``/``B``/``M``/``K`` suffix, hundreds and thousands are shown as
    integers and everything else keeps up to ``decimal_places`` digits.
    """

    if decimal_places < 0:
        raise InvalidNumberError("Decimal precision must be non-negative.")
    if not math.isfinite(value):
        raise InvalidNumberError("Value must be a finite number.")

    magnitude = abs(value)
    sign = "-" if value < 0 else ""

    if 0 < magnitude < 0.01:
        return _exponential(value, decimal_places)

    for threshold, suffix in _SUFFIXES:
        if magnitude >= threshold:
            return f"{sign}{magnitude / threshold:.{decimal_places}f}{suffix}"

    if magnitude >= 1e4:
        if magnitude >= 1e5:
            return f"{sign}{magnitude / 1e3:.0f}K"
        text = f"{magnitude / 1e3:.1f}"
        if text.endswith(".0"):
            text = text[:-2]
        return f"{sign}{text}K"

    if magnitude >= 100:
        rounded = _round_half_up(magnitude, 0)
        return f"{sign}{int(rounded):,}"

    rounded = _round_half_up(magnitude, decimal_places)
    if rounded == 0:
        return "0"
    text = f"{rounded:,.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{sign}{text}"


__all__ = [
    "ConversionError",
    "UnknownCategoryError",
    "UnknownUnitError",
    "InvalidNumberError",
    "ConversionResult",
    "resolve_category",
    "resolve_unit",
    "coerce_number",
    "list_categories",
    "unit_codes",
    "list_units",
    "base_unit",
    "convert",
    "expand_to_all_units",
    "format_number",
]
