"""Error taxonomy and the JSON error contract."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


class TuskersError(Exception):
    """Base class for failures that map onto an HTTP status."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(TuskersError):
    status_code = 400
    message = "Invalid request data"

    def __init__(self, message: str | None = None, errors: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.errors = errors or {}

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class Unauthorized(TuskersError):
    status_code = 401
    message = "No token provided"


class InvalidToken(Unauthorized):
    message = "Invalid token"


class InvalidCredentials(Unauthorized):
    message = "Invalid credentials"


class NotFound(TuskersError):
    status_code = 404
    message = "Not found"


class InternalError(TuskersError):
    pass


def register_error_handlers(app: Flask) -> None:
    """Render every failure as ``{"message": ...}`` with a matching status."""

    @app.errorhandler(TuskersError)
    def handle_tuskers_error(error: TuskersError):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return jsonify({"message": error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        app.logger.exception("Unhandled error: %s", error)
        return jsonify({"message": InternalError.message}), 500


__all__ = [
    "TuskersError",
    "ValidationError",
    "Unauthorized",
    "InvalidToken",
    "InvalidCredentials",
    "NotFound",
    "InternalError",
    "register_error_handlers",
]
