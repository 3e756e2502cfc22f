from __future__ import annotations

from functools import wraps

from flask import g, jsonify

from ..core.enums import Role
from .identity import IdentityProvider


def login_required(provider: IdentityProvider):
    """Put the caller's identity on ``g.identity`` or answer 401."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = provider.current_identity()
            if identity is None:
                return jsonify({"success": False, "message": "Unauthorized"}), 401
            g.identity = identity
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(provider: IdentityProvider):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = provider.current_identity()
            if identity is None:
                return jsonify({"success": False, "message": "Unauthorized"}), 401
            if identity.role != Role.ADMIN:
                return jsonify({"success": False, "message": "Forbidden"}), 403
            g.identity = identity
            return view(*args, **kwargs)

        return wrapper

    return decorator
