"""JSON envelope, error translation, request logging and CORS for the API."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StorageError, 500),
)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200, **extra: Any):
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), status


def fail(error: str, *, status: int):
    return jsonify({"success": False, "error": error}), status


def json_body() -> dict:
    """Request JSON as a dict; anything else is a validation error."""

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def status_for(exc: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        status = status_for(exc)
        if status >= 500:
            logger.exception("Storage failure on %s %s", request.method, request.path)
        return fail(str(exc), status=status)

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return fail(exc.description or exc.name, status=exc.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return fail(f"Internal server error: {exc}", status=500)


def register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.get("request_started")
        latency_ms = int((time.perf_counter() - started) * 1000) if started else 0
        response.headers["X-Latency-Ms"] = str(latency_ms)
        logger.info("%s %s -> %s (%dms)", request.method, request.path, response.status_code, latency_ms)
        return response


def register_cors(app: Flask, *, origins: Iterable[str]) -> None:
    CORS(
        app,
        origins=[o for o in origins if o] or "*",
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Content-Length"],
        max_age=600,
    )
