"""Signed, stateless bearer tokens for the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from flask import current_app
from flask_login import UserMixin
from itsdangerous import BadData, URLSafeTimedSerializer

from tuskers.errors import InvalidToken, Unauthorized
from tuskers.models import User

TOKEN_SALT = "tuskers-admin-token"


@dataclass
class TokenPrincipal(UserMixin):
    """The identity carried inside a verified token.

    Verification never touches the database, so a principal outlives the
    deletion of its user until the token expires.
    """

    id: int
    username: str
    role: str

    def to_dict(self) -> dict:
        return {'id': self.id, 'username': self.username, 'role': self.role}


def _serializer() -> URLSafeTimedSerializer:
    secret = current_app.config.get('AUTH_TOKEN_SECRET') or current_app.config['SECRET_KEY']
    return URLSafeTimedSerializer(secret, salt=TOKEN_SALT)


def issue_token(user: User) -> str:
    """Sign ``{id, username, role}`` for ``user``."""
    role = user.role.value if hasattr(user.role, 'value') else str(user.role)
    return _serializer().dumps({'id': user.id, 'username': user.username, 'role': role})


def verify_token(token: str | None) -> TokenPrincipal:
    """
    Validate a token's signature and age.

    Raises:
        Unauthorized: no token was supplied
        InvalidToken: bad signature, malformed payload or expired
    """
    if not token:
        raise Unauthorized()

    max_age = current_app.config.get('AUTH_TOKEN_MAX_AGE', 24 * 60 * 60)
    try:
        payload = _serializer().loads(token, max_age=max_age)
    except BadData as e:
        current_app.logger.info(f"Rejected admin token: {e}")
        raise InvalidToken() from e

    try:
        return TokenPrincipal(
            id=int(payload['id']),
            username=str(payload['username']),
            role=str(payload['role']),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidToken() from e


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token part of an ``Authorization: Bearer <token>`` header."""
    if not header:
        return None
    scheme, _, token = header.strip().partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


__all__ = ['TokenPrincipal', 'issue_token', 'verify_token', 'extract_bearer_token', 'TOKEN_SALT']
