"""Login and comment forms."""

from __future__ import annotations

from wtforms.validators import AnyOf, DataRequired, Length, NumberRange

from tuskers.forms.base import CountField, JSONForm, Present, TextField
from tuskers.models import ContentType


class LoginForm(JSONForm):
    error_message = "Username and password required"

    username = TextField("Username", validators=[DataRequired()])
    password = TextField("Password", validators=[DataRequired()])


class CommentForm(JSONForm):
    error_message = "Invalid comment data"

    content_type = TextField(
        "Content type",
        name="contentType",
        validators=[DataRequired(), AnyOf([kind.value for kind in ContentType])],
    )
    content_id = CountField("Content id", name="contentId", validators=[Present(), NumberRange(min=1)])
    user_name = TextField("Name", name="userName", validators=[DataRequired(), Length(max=255)])
    text = TextField("Comment", validators=[DataRequired()])


__all__ = ['LoginForm', 'CommentForm']
