"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException

from .errors import AppError, InternalAppError, ensure_app_error
from .logging import get_logger


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    payload = {"success": True, "data": data}
    response = jsonify(payload)
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        payload = {"success": False, "error": error.to_dict()}
        response = jsonify(payload)
        response.status_code = status or error.status_code
        return response

    payload = {"success": False, "error": dict(error)}
    response = jsonify(payload)
    response.status_code = status or 400
    return response


def install_error_handlers(app: Flask) -> None:
    """Render HTTP and application errors with the failure envelope."""

    logger = get_logger()

    @app.errorhandler(AppError)
    def _app_error(error: AppError):
        return fail(error)

    @app.errorhandler(HTTPException)
    def _http_error(error: HTTPException):
        return fail(ensure_app_error(error, fallback_code="http_error"))

    @app.errorhandler(Exception)
    def _unhandled(error: Exception):  # pragma: no cover - last resort
        logger.error("unhandled error: %s", error)
        return fail(InternalAppError(message="Internal server error"))


__all__ = ["ok", "fail", "install_error_handlers"]
