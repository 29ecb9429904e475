"""Audit logging for security and administrative events."""

from __future__ import annotations

from typing import Any

from flask import current_app, has_request_context, request


def _remote_addr() -> str | None:
    return request.remote_addr if has_request_context() else None


def log_login_attempt(username: str, success: bool, reason: str | None = None) -> None:
    """
    Log a login attempt (successful or failed).

    Args:
        username: Username submitted with the attempt
        success: Whether login was successful
        reason: Reason for failure (e.g., "unknown_user", "invalid_password")
    """
    if success:
        current_app.logger.info(f"Login succeeded for {username!r} from {_remote_addr()}")
    else:
        current_app.logger.warning(
            f"Login failed for {username!r} from {_remote_addr()}: {reason or 'invalid_credentials'}"
        )


def log_admin_action(
    principal: Any,
    action: str,
    entity_type: str,
    entity_id: int | None = None,
    metadata: dict[str, Any] | None = None
) -> None:
    """
    Log an administrative action.

    Args:
        principal: Token principal who performed the action
        action: Action performed (e.g., "hero_slides_created", "comments_deleted")
        entity_type: Type of entity affected
        entity_id: ID of entity affected
        metadata: Additional metadata
    """
    actor = getattr(principal, 'username', None) or 'anonymous'
    current_app.logger.info(
        f"admin action={action} entity={entity_type}:{entity_id} by={actor} "
        f"ip={_remote_addr()} meta={metadata or {}}"
    )


__all__ = ["log_login_attempt", "log_admin_action"]
