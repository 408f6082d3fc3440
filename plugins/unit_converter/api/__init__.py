"""Unit converter API with standardized responses."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Blueprint, Response, current_app, jsonify, request

from common.errors import ValidationAppError
from common.forms import get_float, get_int
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    ConversionError,
    InvalidNumberError,
    UnknownCategoryError,
    UnknownUnitError,
    convert_and_format,
    expand_ranked,
    format_number,
    handle_message,
    list_categories,
    list_units,
)


class ConvertPayload(SchemaModel):
    value: float | int | str
    from_unit: str
    to_unit: str
    category: str
    decimals: int | None = None


class ExpandPayload(SchemaModel):
    value: float | int | str
    unit: str
    category: str
    preferred_units: list[str] | None = None
    decimals: int | None = None
    ranked: bool = True


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _settings() -> Mapping[str, Any]:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {}) or {}


def _setting(key: str, default: int, **bounds: int) -> int:
    try:
        return get_int(_settings(), key, default, **bounds)
    except ValidationError:
        return default


def _decimals(requested: int | None) -> int:
    if requested is not None:
        return requested
    return _setting("decimal_places", 2, minimum=0, maximum=10)


def _top_count() -> int:
    return _setting("top_conversions", 3, minimum=0)


def _conversion_failure(exc: ConversionError) -> Response:
    if isinstance(exc, UnknownCategoryError):
        code = "unit.invalid_category"
    elif isinstance(exc, UnknownUnitError):
        code = "unit.invalid_unit"
    elif isinstance(exc, InvalidNumberError):
        code = "unit.invalid_number"
    else:  # pragma: no cover - every engine error has a subclass
        code = "unit.conversion_failed"
    return fail(ValidationAppError(message=str(exc), code=code))


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="unit.invalid_request",
            details={"errors": getattr(exc, "details", None) or []},
        )
    )


@api_bp.get("/categories")
def categories() -> Response:
    payload = {category: list_units(category) for category in list_categories()}
    data = {"categories": list(payload.keys()), "units": payload}
    return ok(data)


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except UnknownCategoryError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_category"))
    return ok({"category": category, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        result = convert_and_format(
            payload.value,
            payload.from_unit,
            payload.to_unit,
            payload.category,
            decimal_places=_decimals(payload.decimals),
        )
    except ConversionError as exc:
        return _conversion_failure(exc)
    return ok(result)


@api_bp.post("/expand")
def expand_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ExpandPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        result = expand_ranked(
            payload.value,
            payload.unit,
            payload.category,
            payload.preferred_units,
            decimal_places=_decimals(payload.decimals),
            ranked=payload.ranked,
            top=_top_count(),
        )
    except ConversionError as exc:
        return _conversion_failure(exc)
    return ok(result)


@api_bp.get("/format")
def format_endpoint() -> Response:
    try:
        value = get_float(request.args, "value", 0.0)
        decimals = get_int(request.args, "decimals", _decimals(None), minimum=0, maximum=10)
        formatted = format_number(value, decimals)
    except ValidationError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_number"))
    except ConversionError as exc:
        return _conversion_failure(exc)
    return ok({"value": value, "decimals": decimals, "formatted": formatted})


@api_bp.post("/messages")
def messages_endpoint() -> Response:
    return jsonify(handle_message(request.get_json(silent=True)))


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
    "expand_endpoint",
    "format_endpoint",
    "messages_endpoint",
]
