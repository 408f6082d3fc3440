"""Handler for the ``CONVERT_UNITS`` message boundary.

Selection surfaces post ``{"type": "CONVERT_UNITS", "value", "unitCode",
"category"}`` and expect either ``{"conversions": [...]}`` or
``{"error": "..."}`` back. Failures never escape as exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional

import pydantic
from pydantic import AliasChoices, Field

from common.logging import get_logger
from common.validation import SchemaModel, ValidationError, parse_model

from .converter import ConversionError, expand_to_all_units

logger = get_logger(__name__)

CONVERT_UNITS = "CONVERT_UNITS"


class ConvertUnitsMessage(SchemaModel):
    model_config = pydantic.ConfigDict(
        extra="ignore", str_strip_whitespace=True, populate_by_name=True
    )

    type: Literal["CONVERT_UNITS"]
    value: float
    unit_code: str = Field(validation_alias=AliasChoices("unitCode", "unitType", "unit_code"))
    category: str
    preferred_units: Optional[List[str]] = Field(
        default=None, validation_alias=AliasChoices("preferredUnits", "preferred_units")
    )
    decimal_places: int = Field(
        default=2, ge=0, le=10, validation_alias=AliasChoices("decimalPlaces", "decimal_places")
    )


def handle_message(message: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Dispatch ``message`` and build the response payload."""

    if not isinstance(message, Mapping) or message.get("type") != CONVERT_UNITS:
        return {"error": "Unknown message type"}

    try:
        payload = parse_model(ConvertUnitsMessage, message)
        conversions = expand_to_all_units(
            payload.value,
            payload.unit_code,
            payload.category,
            payload.preferred_units,
            decimal_places=payload.decimal_places,
        )
    except (ValidationError, ConversionError) as exc:
        logger.warning("CONVERT_UNITS rejected: %s", exc)
        return {"error": f"Conversion failed: {exc}"}
    return {"conversions": [result.to_dict() for result in conversions]}


__all__ = ["CONVERT_UNITS", "ConvertUnitsMessage", "handle_message"]
