"""Unit detector API."""

from __future__ import annotations

from typing import Any, Mapping

import pydantic
from flask import Blueprint, Response, current_app, request

from common.errors import ValidationAppError
from common.forms import get_int
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import DEFAULT_MAX_LENGTH, convert_selection, detect


class DetectPayload(SchemaModel):
    # offsets refer to the text as sent
    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=False)

    text: str


class SelectionPayload(SchemaModel):
    text: str
    preferred_units: list[str] | None = None


api_bp = Blueprint("unit_detector_api", __name__, url_prefix="/api/unit_detector")


def _setting(plugin: str, key: str, default: int, **bounds: int) -> int:
    settings: Mapping[str, Any] = (
        current_app.config.get("PLUGIN_SETTINGS", {}).get(plugin, {}) or {}
    )
    try:
        return get_int(settings, key, default, **bounds)
    except ValidationError:
        return default


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="unit.invalid_request",
            details={"errors": getattr(exc, "details", None) or []},
        )
    )


@api_bp.post("/detect")
def detect_endpoint() -> Response:
    try:
        payload = parse_model(DetectPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    detections = [item.to_dict() for item in detect(payload.text)]
    return ok({"detections": detections, "count": len(detections)})


@api_bp.post("/selection")
def selection_endpoint() -> Response:
    try:
        payload = parse_model(SelectionPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    result = convert_selection(
        payload.text,
        max_length=_setting(
            "unit_detector", "max_selection_length", DEFAULT_MAX_LENGTH, minimum=1
        ),
        preferred_units=payload.preferred_units,
        decimal_places=_setting(
            "unit_converter", "decimal_places", 2, minimum=0, maximum=10
        ),
        top=_setting("unit_converter", "top_conversions", 3, minimum=0),
    )
    if result is None:
        return ok({"match": None})
    return ok(result)


blueprints = [api_bp]


__all__ = ["blueprints", "detect_endpoint", "selection_endpoint"]
