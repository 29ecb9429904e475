"""JSON-bound WTForms plumbing shared by the API forms."""

from __future__ import annotations

from typing import Type, TypeVar

from flask import request
from flask_wtf import FlaskForm
from wtforms import BooleanField, IntegerField, StringField
from wtforms.validators import StopValidation

from tuskers.errors import ValidationError
from tuskers.models import INT_MAX, INT_MIN

FormT = TypeVar('FormT', bound='JSONForm')


class JSONForm(FlaskForm):
    """FlaskForm fed from the request's JSON body.

    Bearer tokens replace cookies on this API, so there is no CSRF token.
    """

    error_message = "Invalid request data"

    class Meta:
        csrf = False

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Errors keyed by the JSON name clients sent, not the Python attribute."""
        return {field.name: list(field.errors) for field in self if field.errors}


def _is_null(field, valuelist) -> bool:
    """JSON ``null`` counts as an absent key, so Optional() and Present() see no raw data."""
    if valuelist and valuelist[0] is None:
        field.raw_data = []
        return True
    return False


class TextField(StringField):
    """StringField that treats JSON ``null`` as absent and stringifies scalars."""

    def process_formdata(self, valuelist):
        if _is_null(self, valuelist):
            return
        if valuelist:
            value = valuelist[0]
            self.data = value if isinstance(value, str) else str(value)


class FlagField(BooleanField):
    """BooleanField that keeps its default when the key is absent from the body."""

    def process_formdata(self, valuelist):
        if valuelist and not _is_null(self, valuelist):
            super().process_formdata(valuelist)


class CountField(IntegerField):
    """IntegerField for JSON numbers that fit an Integer column; booleans and fractions are rejected."""

    def process_formdata(self, valuelist):
        if not valuelist or _is_null(self, valuelist):
            return
        value = valuelist[0]
        try:
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError(value)
            number = int(value)
        except (TypeError, ValueError, OverflowError):
            self.data = None
            raise ValueError(self.gettext('Not a valid integer value.')) from None
        if not INT_MIN <= number <= INT_MAX:
            self.data = None
            raise ValueError(self.gettext('Number is out of range.'))
        self.data = number


class Present:
    """Require the key to be sent, allowing falsy values such as ``0``."""

    field_flags = {'required': True}

    def __init__(self, message: str | None = None):
        self.message = message

    def __call__(self, form, field):
        if not field.raw_data or field.raw_data[0] is None or field.raw_data[0] == '':
            message = self.message or field.gettext('This field is required.')
            raise StopValidation(message)


def validate_payload(form_class: Type[FormT]) -> FormT:
    """
    Bind ``form_class`` to the JSON body and validate it as a whole.

    Raises:
        ValidationError: body is not a JSON object or any field fails
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    form = form_class()
    if not form.validate():
        raise ValidationError(form.error_message, errors=form.field_errors)
    return form


__all__ = ['JSONForm', 'TextField', 'FlagField', 'CountField', 'Present', 'validate_payload']
