"""Request body forms for the JSON API."""

from tuskers.forms.base import validate_payload
from tuskers.forms.content import (
    GalleryItemForm,
    HeroSlideForm,
    NewsArticleForm,
    PlayerForm,
    PlayerStatsForm,
)
from tuskers.forms.registration import PlayerRegistrationForm, RegistrationStatusForm
from tuskers.forms.social import CommentForm, LoginForm

__all__ = [
    'validate_payload',
    'HeroSlideForm',
    'NewsArticleForm',
    'PlayerForm',
    'PlayerStatsForm',
    'GalleryItemForm',
    'PlayerRegistrationForm',
    'RegistrationStatusForm',
    'CommentForm',
    'LoginForm',
]
