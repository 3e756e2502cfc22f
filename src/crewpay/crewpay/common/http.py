from __future__ import annotations

from typing import Any

from flask import jsonify

from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError


def ok(data: Any = None, **extra: Any):
    return jsonify({"success": True, "data": data, **extra}), 200


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def domain_error(exc: DomainError):
    """JSON response for a business-rule failure raised by a service."""
    if isinstance(exc, AuthenticationError):
        return fail(str(exc), 401)
    if isinstance(exc, AuthorizationError):
        return fail(str(exc), 403)
    return fail(str(exc), 400)
