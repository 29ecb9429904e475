"""Query string and path parameter parsing shared by the API blueprints."""

from __future__ import annotations

from flask import request
from werkzeug.routing import IntegerConverter

from tuskers.errors import ValidationError
from tuskers.models import INT_MAX, ContentType


class IdConverter(IntegerConverter):
    """``<id:...>`` path segment: a non-negative int that fits an Integer column.

    Larger values do not match the route, so they 404 before any query runs.
    """

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault('max', INT_MAX)
        super().__init__(map, *args, **kwargs)


def register_converters(app) -> None:
    """Must run before any blueprint using ``<id:...>`` is registered."""
    app.url_map.converters['id'] = IdConverter


def parse_limit(arg: str = 'limit') -> int | None:
    """Read an optional positive integer ``?limit=`` from the query string."""
    raw = request.args.get(arg)
    if raw is None or raw == '':
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValidationError("Limit must be a positive integer") from None
    if not 0 < limit <= INT_MAX:
        raise ValidationError("Limit must be a positive integer")
    return limit


def parse_content_type(value: str) -> ContentType:
    """Map a path segment onto the closed set of content types."""
    try:
        return ContentType(value)
    except ValueError:
        raise ValidationError("Invalid content type") from None
