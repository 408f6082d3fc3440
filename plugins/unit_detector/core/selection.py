"""Turn a highlighted snippet of text into a ranked set of conversions."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from common.logging import get_logger
from plugins.unit_converter.core import expand_ranked

from .detector import detect

logger = get_logger(__name__)

DEFAULT_MAX_LENGTH = 100


def convert_selection(
    text: str,
    *,
    max_length: int = DEFAULT_MAX_LENGTH,
    preferred_units: Optional[Sequence[str]] = None,
    decimal_places: int = 2,
    top: int = 3,
) -> Optional[Dict[str, Any]]:
    """Convert the first quantity found in ``text``.

    Returns ``None`` when the selection is blank, longer than ``max_length``
    or contains no recognisable unit.
    """

    selection = (text or "").strip()
    if not selection or len(selection) > max_length:
        return None

    detections = detect(selection)
    if not detections:
        return None

    first = detections[0]
    expanded = expand_ranked(
        first.value,
        first.unit_code,
        first.category,
        preferred_units,
        decimal_places=decimal_places,
        top=top,
    )
    logger.debug(
        "selection %r -> %s %s (%d conversions)",
        first.full_match_text,
        first.value,
        first.unit_code,
        len(expanded["conversions"]),
    )
    return {
        "originalValue": first.value,
        "originalUnit": first.unit_token,
        "unitCode": first.unit_code,
        "category": first.category.value,
        "detection": first.to_dict(),
        **expanded,
    }


__all__ = ["DEFAULT_MAX_LENGTH", "convert_selection"]
