"""Parsing helpers for query strings and plugin settings."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .validation import ValidationError

SourceLike = Mapping[str, Any] | Any


def _lookup(data: SourceLike, key: str) -> Any:
    if data is None:
        return None
    getter = getattr(data, "get", None)
    if callable(getter):
        return getter(key)
    return None


def _check_bounds(label: str, value: float, minimum: float | None, maximum: float | None) -> None:
    if minimum is not None and value < minimum:
        raise ValidationError(f"{label} must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{label} must be ≤ {maximum}")


def get_float(
    data: SourceLike,
    key: str,
    default: float,
    *,
    field_name: str | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Read a finite float from ``data[key]``.

    Missing or blank values fall back to ``default``. Bounds are inclusive.
    """

    label = field_name or key
    raw = _lookup(data, key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        value = float(default)
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid value for {label}") from exc
        if not math.isfinite(value):
            raise ValidationError(f"Invalid value for {label}")
    _check_bounds(label, value, minimum, maximum)
    return value


def get_int(
    data: SourceLike,
    key: str,
    default: int,
    *,
    field_name: str | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read an integer from ``data[key]``, rounding numeric strings like ``"2.0"``."""

    value = int(round(get_float(data, key, float(default), field_name=field_name)))
    _check_bounds(field_name or key, value, minimum, maximum)
    return value


__all__ = ["get_float", "get_int"]
