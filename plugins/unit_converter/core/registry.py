"""Shared Pint registry helpers for the unit converter core."""

from __future__ import annotations

from functools import lru_cache

from pint import UnitRegistry

# Calendar spans used for month/year conversions. Pint's own ``month`` and
# ``year`` are Julian (365.25 days), which does not match the unit table.
_CUSTOM_DEFINITIONS: tuple[str, ...] = (
    "commercial_month = 30 * day",
    "commercial_year = 365 * day",
)


def _build_registry() -> UnitRegistry:
    registry = UnitRegistry(autoconvert_offset_to_baseunit=True)
    for definition in _CUSTOM_DEFINITIONS:
        registry.define(definition)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return _build_registry()


def to_unit(value: float, source: str, target: str) -> float:
    """Convert ``value`` between two Pint unit expressions."""

    registry = get_registry()
    quantity = registry.Quantity(value, source)
    return float(quantity.to(target).magnitude)


__all__ = ["get_registry", "to_unit"]
