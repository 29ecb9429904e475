"""Admin forms for site content."""

from __future__ import annotations

from wtforms.validators import DataRequired, Length, NumberRange, Optional

from tuskers.forms.base import CountField, FlagField, JSONForm, Present, TextField


class HeroSlideForm(JSONForm):
    error_message = "Invalid hero slide data"

    title = TextField("Title", validators=[DataRequired()])
    description = TextField("Description", validators=[DataRequired()])
    date = TextField("Date", validators=[DataRequired(), Length(max=64)])
    image = TextField("Image URL", validators=[DataRequired(), Length(max=1024)])
    is_active = FlagField("Active", name="isActive", default=True)
    order = CountField("Display order", validators=[Optional()], default=0)


class NewsArticleForm(JSONForm):
    error_message = "Invalid news article data"

    title = TextField("Title", validators=[DataRequired()])
    description = TextField("Teaser", validators=[DataRequired()])
    content = TextField("Body", validators=[DataRequired()])
    date = TextField("Date", validators=[DataRequired(), Length(max=64)])
    image = TextField("Image URL", validators=[DataRequired(), Length(max=1024)])
    is_published = FlagField("Published", name="isPublished", default=True)


class PlayerForm(JSONForm):
    error_message = "Invalid player data"

    name = TextField("Name", validators=[DataRequired(), Length(max=255)])
    role = TextField("Role", validators=[DataRequired(), Length(max=255)])
    jersey_number = CountField(
        "Jersey number",
        name="jerseyNumber",
        validators=[Present(), NumberRange(min=0)],
    )
    image = TextField("Image URL", validators=[DataRequired(), Length(max=1024)])
    is_captain = FlagField("Captain", name="isCaptain", default=False)
    is_active = FlagField("Active", name="isActive", default=True)


def _counter(label: str, json_name: str) -> CountField:
    # Absent counters stay None so an upsert leaves the stored value alone
    return CountField(label, name=json_name, validators=[Optional(), NumberRange(min=0)], default=None)


class PlayerStatsForm(JSONForm):
    error_message = "Invalid player stats data"

    matches = _counter("Matches", "matches")
    runs_scored = _counter("Runs scored", "runsScored")
    balls_faced = _counter("Balls faced", "ballsFaced")
    fours = _counter("Fours", "fours")
    sixes = _counter("Sixes", "sixes")
    wickets_taken = _counter("Wickets taken", "wicketsTaken")
    balls_bowled = _counter("Balls bowled", "ballsBowled")
    runs_conceded = _counter("Runs conceded", "runsConceded")
    catches = _counter("Catches", "catches")
    run_outs = _counter("Run outs", "runOuts")
    stumpings = _counter("Stumpings", "stumpings")


class GalleryItemForm(JSONForm):
    error_message = "Invalid gallery item data"

    title = TextField("Title", validators=[DataRequired()])
    image = TextField("Image URL", validators=[DataRequired(), Length(max=1024)])
    category = TextField(
        "Category",
        validators=[Optional(), Length(max=64)],
        default="Photos",
        filters=[lambda value: value or "Photos"],
    )
    date = TextField("Date", validators=[DataRequired(), Length(max=64)])
    is_visible = FlagField("Visible", name="isVisible", default=True)


__all__ = [
    'HeroSlideForm',
    'NewsArticleForm',
    'PlayerForm',
    'PlayerStatsForm',
    'GalleryItemForm',
]
