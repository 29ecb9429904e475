"""Like/dislike/share counters keyed by ``(content_type, content_id)``.

Every increment is a single ``INSERT ... ON CONFLICT DO UPDATE`` so the
arithmetic happens inside the store and concurrent calls on the same key
cannot lose updates. There is no decrement.
"""

from __future__ import annotations

from typing import Any

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import func

from tuskers.errors import InternalError
from tuskers.extensions import db
from tuskers.models import ContentType, SocialInteraction
from tuskers.services.upsert import dialect_insert

COUNTERS = ('likes', 'dislikes', 'shares')


def zero_counters() -> dict[str, int]:
    return {counter: 0 for counter in COUNTERS}


def build_increment_statement(dialect_name: str, content_type: str, content_id: int, counter: str):
    """
    Build the atomic upsert that bumps ``counter`` by one.

    A new key is inserted with ``counter`` at 1 and the other counters at 0.
    """
    if counter not in COUNTERS:
        raise ValueError(f"Unknown counter: {counter}")
    insert = dialect_insert(dialect_name)

    table = SocialInteraction.__table__
    initial = zero_counters()
    initial[counter] = 1

    stmt = insert(table).values(content_type=content_type, content_id=content_id, **initial)
    return stmt.on_conflict_do_update(
        index_elements=[table.c.content_type, table.c.content_id],
        set_={counter: table.c[counter] + 1, 'updated_at': func.now()},
    )


class SocialLedger:
    """Per-content engagement counters."""

    def _find(self, content_type: str, content_id: int) -> SocialInteraction | None:
        return db.session.execute(
            select(SocialInteraction).where(
                SocialInteraction.content_type == content_type,
                SocialInteraction.content_id == content_id,
            )
        ).scalars().first()

    def get(self, content_type: ContentType | str, content_id: int) -> dict[str, Any]:
        """Counters for a key; an untouched key reads as all zeros."""
        content_type = _tag(content_type)
        interaction = self._find(content_type, content_id)
        if interaction is None:
            return zero_counters()
        return serialize_interaction(interaction)

    def increment(self, content_type: ContentType | str, content_id: int, counter: str) -> dict[str, Any]:
        """Add one to ``counter`` for the key and return the row afterwards."""
        content_type = _tag(content_type)
        stmt = build_increment_statement(
            db.session.get_bind().dialect.name, content_type, content_id, counter
        )
        try:
            db.session.execute(stmt)
            # Read back inside the same transaction so the row reflects this increment
            db.session.expire_all()
            interaction = self._find(content_type, content_id)
            payload = serialize_interaction(interaction)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to increment {counter} for {content_type}:{content_id}: {e}")
            raise InternalError(f"Failed to update {counter}") from e
        return payload

    def increment_likes(self, content_type: ContentType | str, content_id: int) -> dict[str, Any]:
        return self.increment(content_type, content_id, 'likes')

    def increment_dislikes(self, content_type: ContentType | str, content_id: int) -> dict[str, Any]:
        return self.increment(content_type, content_id, 'dislikes')

    def increment_shares(self, content_type: ContentType | str, content_id: int) -> dict[str, Any]:
        return self.increment(content_type, content_id, 'shares')


def _tag(content_type: ContentType | str) -> str:
    return content_type.value if isinstance(content_type, ContentType) else str(content_type)


def serialize_interaction(interaction: SocialInteraction) -> dict[str, Any]:
    return {
        'id': interaction.id,
        'contentType': interaction.content_type,
        'contentId': interaction.content_id,
        'likes': interaction.likes,
        'dislikes': interaction.dislikes,
        'shares': interaction.shares,
        'updatedAt': interaction.updated_at.isoformat() if interaction.updated_at else None,
    }


social_ledger = SocialLedger()


__all__ = [
    'COUNTERS',
    'SocialLedger',
    'social_ledger',
    'build_increment_statement',
    'serialize_interaction',
    'zero_counters',
]
