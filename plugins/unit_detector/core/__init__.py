"""Unit detection helpers."""

from .detector import DetectedUnit, detect, detect_first
from .patterns import UNIT_PATTERNS, UnitPattern
from .selection import DEFAULT_MAX_LENGTH, convert_selection

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DetectedUnit",
    "UNIT_PATTERNS",
    "UnitPattern",
    "convert_selection",
    "detect",
    "detect_first",
]
