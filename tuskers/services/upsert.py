"""Dialect-specific ``INSERT ... ON CONFLICT`` support."""

from __future__ import annotations

from sqlalchemy.dialects import postgresql, sqlite

_UPSERT_DIALECTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


def dialect_insert(dialect_name: str):
    """Return the ``insert`` construct that supports ``on_conflict_do_update``.

    Raises:
        NotImplementedError: the backend has no ON CONFLICT clause we build for
    """
    try:
        return _UPSERT_DIALECTS[dialect_name]
    except KeyError:
        raise NotImplementedError(f"Upserts are not supported on {dialect_name}") from None


__all__ = ['dialect_insert']
