from __future__ import annotations

import traceback

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

from .schemas import ErrorResponse
from .timestamps import utc_timestamp


class WeatherAppError(Exception):
    """Base error carrying the HTTP status it should be surfaced with."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WeatherAppError):
    """Raised when user input cannot be turned into a weather request."""

    status_code = 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFound)
    def not_found(error: NotFound):
        path = request.full_path if request.query_string else request.path
        body = ErrorResponse(error="Not Found", path=path)
        return jsonify(body.model_dump(exclude_none=True)), 404

    @app.errorhandler(WeatherAppError)
    def weather_app_error(error: WeatherAppError):
        if error.status_code >= 500:
            return _internal_error(error, error.status_code)
        return _request_error(error, error.status_code, error.message)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        if error.code is None or error.code >= 500:
            return _internal_error(error, error.code or 500)
        return _request_error(error, error.code, error.description)

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception):
        return _internal_error(error)


def _request_error(error: Exception, status: int, message: str | None):
    current_app.logger.warning("%s %s -> %s: %s", request.method, request.path, status, message)
    body = ErrorResponse(
        error="Request Error",
        message=message or None,
        timestamp=utc_timestamp(),
        stack=_stack(error),
    )
    return jsonify(body.model_dump(exclude_none=True)), status


def _internal_error(error: Exception, status: int = 500):
    current_app.logger.error(
        "Unhandled error on %s %s", request.method, request.path, exc_info=error
    )
    production = current_app.config.get("PRODUCTION", False)
    body = ErrorResponse(
        error="Internal Server Error",
        message=None if production else (str(error) or None),
        timestamp=utc_timestamp(),
        stack=_stack(error),
    )
    return jsonify(body.model_dump(exclude_none=True)), status


def _stack(error: Exception) -> str | None:
    if current_app.config.get("PRODUCTION", False):
        return None
    return "".join(traceback.format_exception(error))
