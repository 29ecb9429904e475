"""Authentication helpers shared across blueprints."""

from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar, cast

from flask import Flask, g, jsonify
from flask_login import current_user

from tuskers.errors import TuskersError, Unauthorized
from tuskers.extensions import login_manager
from tuskers.services.tokens import TokenPrincipal, extract_bearer_token, verify_token

F = TypeVar('F', bound=Callable[..., object])


def init_auth(app: Flask) -> None:
    """Load ``current_user`` from the bearer token on each request."""
    login_manager.init_app(app)
    # Tokens are the only credential; never fall back to the cookie session
    login_manager.session_protection = None

    @login_manager.request_loader
    def load_principal_from_request(req) -> TokenPrincipal | None:
        token = extract_bearer_token(req.headers.get('Authorization'))
        try:
            return verify_token(token)
        except TuskersError as e:
            # Kept for the unauthorized handler, which owns the 401 response
            g.auth_error = e
            return None

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        error = getattr(g, 'auth_error', None) or Unauthorized()
        return jsonify(error.to_dict()), error.status_code


def admin_required(func: F) -> F:
    """Decorator requiring a valid admin bearer token.

    Any verified token grants admin access; the role claim is not checked.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        return func(*args, **kwargs)
    return cast(F, wrapper)


__all__ = ['init_auth', 'admin_required']
