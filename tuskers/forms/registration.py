"""Public player registration form."""

from __future__ import annotations

from wtforms.validators import AnyOf, DataRequired, Email, Length, Optional

from tuskers.forms.base import JSONForm, TextField
from tuskers.models import RegistrationStatus


def _optional(label: str, json_name: str, max_length: int | None = None) -> TextField:
    validators = [Optional()]
    if max_length:
        validators.append(Length(max=max_length))
    return TextField(label, name=json_name, validators=validators)


class PlayerRegistrationForm(JSONForm):
    error_message = "Invalid registration data"

    first_name = TextField("First name", name="firstName", validators=[DataRequired(), Length(max=255)])
    last_name = TextField("Last name", name="lastName", validators=[DataRequired(), Length(max=255)])
    email = TextField("Email", validators=[DataRequired(), Email(), Length(max=255)])
    phone = TextField("Phone", validators=[DataRequired(), Length(max=32)])
    date_of_birth = TextField("Date of birth", name="dateOfBirth", validators=[DataRequired(), Length(max=32)])
    position = TextField("Position", validators=[DataRequired(), Length(max=64)])
    batting_style = _optional("Batting style", "battingStyle", 64)
    bowling_style = _optional("Bowling style", "bowlingStyle", 64)
    experience = _optional("Experience", "experience")
    previous_teams = _optional("Previous teams", "previousTeams")
    emergency_contact_name = _optional("Emergency contact", "emergencyContactName", 255)
    emergency_contact_phone = _optional("Emergency contact phone", "emergencyContactPhone", 32)
    motivation = _optional("Motivation", "motivation")


class RegistrationStatusForm(JSONForm):
    error_message = "Invalid status"

    status = TextField(
        "Status",
        validators=[DataRequired(), AnyOf([status.value for status in RegistrationStatus])],
    )


__all__ = ['PlayerRegistrationForm', 'RegistrationStatusForm']
