"""Shared pieces of the JSON controller layer."""

from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError()
        return view(*args, **kwargs)

    return wrapper


def current_actor_id() -> int:
    return int(session["user_id"])


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, (AuthenticationError, AuthorizationError)):
            app.logger.warning("%s on %s %s: %s", e.code, request.method, request.path, e)
        return jsonify({"success": False, "error": e.code, "message": str(e)}), e.http_status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"success": False, "error": "HTTP_ERROR", "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = f"Internal error: {e}" if app.config.get("DEBUG") else "Internal server error"
        return jsonify({"success": False, "error": "INTERNAL_ERROR", "message": message}), 500
