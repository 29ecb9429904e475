from tuskers.models.models import (
    Comment,
    INT_MAX,
    INT_MIN,
    ContentType,
    GalleryItem,
    HeroSlide,
    NewsArticle,
    Player,
    PlayerRegistration,
    PlayerStats,
    RegistrationStatus,
    SocialInteraction,
    TimestampedBase,
    User,
    UserRole,
)

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "Comment",
    "ContentType",
    "GalleryItem",
    "HeroSlide",
    "NewsArticle",
    "Player",
    "PlayerRegistration",
    "PlayerStats",
    "RegistrationStatus",
    "SocialInteraction",
    "TimestampedBase",
    "User",
    "UserRole",
]
