"""Find ``<number> <unit>`` mentions in free text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from common.logging import get_logger
from plugins.unit_converter.core.units import Category

from .patterns import UNIT_PATTERNS, UnitPattern

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DetectedUnit:
    """One quantity found in text, with character offsets into the source."""

    value: float
    unit_token: str
    unit_code: str
    category: Category
    full_match_text: str
    start_offset: int
    end_offset: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "unitToken": self.unit_token,
            "unitCode": self.unit_code,
            "category": self.category.value,
            "fullMatchText": self.full_match_text,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
        }


def _candidates(
    text: str, patterns: Iterable[UnitPattern]
) -> Iterator[Tuple[int, int, DetectedUnit]]:
    for priority, pattern in enumerate(patterns):
        for match in pattern.regex.finditer(text):
            raw = float(match.group("value"))
            if not math.isfinite(raw):
                continue
            yield match.start(), priority, DetectedUnit(
                value=raw * pattern.scale,
                unit_token=match.group("unit"),
                unit_code=pattern.unit_code,
                category=pattern.category,
                full_match_text=match.group(0),
                start_offset=match.start(),
                end_offset=match.end(),
            )


def detect(text: str) -> List[DetectedUnit]:
    """Return non-overlapping detections ordered by their position in ``text``.

    Matches starting at the same offset are resolved by pattern priority;
    any candidate overlapping an already accepted span is dropped.
    """

    if not isinstance(text, str) or not text.strip():
        return []

    candidates = sorted(_candidates(text, UNIT_PATTERNS), key=lambda item: item[:2])
    accepted: List[DetectedUnit] = []
    cursor = 0
    for start, _priority, detection in candidates:
        if start < cursor:
            continue
        accepted.append(detection)
        cursor = detection.end_offset
    logger.debug("detected %d unit mention(s) in %d chars", len(accepted), len(text))
    return accepted


def detect_first(text: str) -> DetectedUnit | None:
    """Return the earliest detection in ``text`` or ``None``."""

    found = detect(text)
    return found[0] if found else None


__all__ = ["DetectedUnit", "detect", "detect_first"]
