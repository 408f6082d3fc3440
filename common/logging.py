"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

from flask import Flask, g, has_request_context, request

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"
DEFAULT_LEVEL = "INFO"
ROOT_LOGGER = "unit_lens"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the active request id, or ``-`` outside requests."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = (
                getattr(g, "request_id", "-") if has_request_context() else "-"
            )
        return True


def get_logger(name: str = ROOT_LOGGER, level: str | int | None = None) -> logging.Logger:
    """Return a logger under the shared ``unit_lens`` parent.

    Only the parent carries a handler; module loggers such as
    ``get_logger(__name__)`` become ``unit_lens.<module>`` and inherit its level.
    """

    parent = logging.getLogger(ROOT_LOGGER)
    if not parent.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        handler.addFilter(RequestIdFilter())
        parent.addHandler(handler)
        parent.setLevel(DEFAULT_LEVEL)
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level if isinstance(level, int) else str(level).upper())
    return logger


def _request_context() -> dict[str, Any]:
    return {
        "request_id": getattr(g, "request_id", "-"),
        "path": request.path,
        "method": request.method,
    }


def install_request_logging(app: Flask, *, level: str | int | None = None) -> None:
    logger = get_logger(level=level)

    @app.before_request
    def _begin_request() -> None:
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        context = _request_context()
        logger.info(
            "%s %s -> %s (%.2f ms)",
            context["method"],
            context["path"],
            response.status_code,
            duration_ms,
            extra=context,
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error("request error: %s", exc, extra=_request_context())


__all__ = ["ROOT_LOGGER", "RequestIdFilter", "get_logger", "install_request_logging"]
