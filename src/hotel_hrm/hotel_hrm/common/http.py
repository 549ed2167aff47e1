from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..auth.session import AuthStateProvider
from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def make_login_required(auth_state: AuthStateProvider):
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not auth_state.read().is_authenticated:
                return json_error("Please log in to continue", 401)
            return view(*args, **kwargs)

        return wrapper

    return login_required


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        return json_error(str(err), err.status_code)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        # HTTP errors raised by Flask itself (404 routing, 405, ...) keep their code.
        code = getattr(err, "code", None)
        if isinstance(code, int) and 400 <= code < 500:
            return json_error(getattr(err, "description", str(err)), code)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return json_error(f"Internal error: {err}", 500)
        return json_error("Internal error", 500)
