"""Admin credential checks."""

from __future__ import annotations

from tuskers.errors import InvalidCredentials
from tuskers.extensions import db
from tuskers.models import User
from tuskers.services.audit import log_login_attempt
from tuskers.services.tokens import issue_token


def get_user_by_username(username: str) -> User | None:
    return db.session.query(User).filter(User.username == username).first()


def serialize_user(user: User) -> dict:
    return {
        'id': user.id,
        'username': user.username,
        'role': user.role.value if hasattr(user.role, 'value') else user.role,
    }


def login(username: str, password: str) -> dict:
    """
    Exchange a username and password for a signed token.

    Returns:
        ``{"token": ..., "user": {"id", "username", "role"}}``

    Raises:
        InvalidCredentials: unknown username or wrong password
    """
    user = get_user_by_username(username)
    if user is None:
        log_login_attempt(username, success=False, reason="unknown_user")
        raise InvalidCredentials()

    if not user.check_password(password):
        log_login_attempt(username, success=False, reason="invalid_password")
        raise InvalidCredentials()

    log_login_attempt(username, success=True)
    return {'token': issue_token(user), 'user': serialize_user(user)}


def create_user(username: str, password: str, role=None) -> User:
    """Provision an admin account; callers check for duplicates first."""
    user = User(username=username)
    if role is not None:
        user.role = role
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


__all__ = ['login', 'create_user', 'get_user_by_username', 'serialize_user']
