"""Public comments attached to any content item."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from tuskers.extensions import db
from tuskers.models import Comment, ContentType
from tuskers.services.crud import CRUDService


class CommentLedger(CRUDService[Comment]):
    """Comments keyed by ``(content_type, content_id)``, newest first.

    Posting is anonymous: ``user_name`` is whatever the client sends and is
    not tied to a ``User``. Deletes are admin-only and permanent.
    """

    def __init__(self):
        super().__init__(
            Comment,
            ordering=(Comment.created_at.desc(), Comment.id.desc()),
            label='Comment',
        )

    def list_for(self, content_type: ContentType | str, content_id: int) -> list[Comment]:
        tag = content_type.value if isinstance(content_type, ContentType) else str(content_type)
        return list(db.session.execute(
            select(Comment)
            .where(Comment.content_type == tag, Comment.content_id == content_id)
            .order_by(*self.ordering)
        ).scalars())

    def post(self, content_type: ContentType | str, content_id: int, user_name: str, text: str) -> Comment:
        tag = content_type.value if isinstance(content_type, ContentType) else str(content_type)
        comment = Comment(content_type=tag, content_id=content_id, user_name=user_name, text=text)
        db.session.add(comment)
        self._commit('create')
        return comment


def serialize_comment(comment: Comment) -> dict[str, Any]:
    return {
        'id': comment.id,
        'contentType': comment.content_type,
        'contentId': comment.content_id,
        'userName': comment.user_name,
        'text': comment.text,
        'likes': comment.likes,
        'dislikes': comment.dislikes,
        'createdAt': comment.created_at.isoformat() if comment.created_at else None,
    }


comment_ledger = CommentLedger()


__all__ = ['CommentLedger', 'comment_ledger', 'serialize_comment']
