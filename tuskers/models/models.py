from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum as SqlEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from tuskers.extensions import db, bcrypt

# SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set
IDENTITY_TABLE_ARGS = {"sqlite_autoincrement": True}

# Integer columns are 32-bit on PostgreSQL; SQLite overflows past 64 bits
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class TimestampedBase(db.Model):
    """Abstract base providing a monotonic integer id and a creation timestamp."""

    __abstract__ = True
    __table_args__ = IDENTITY_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )


class UserRole(Enum):
    ADMIN = "admin"


class ContentType(Enum):
    """Tags accepted as the ``contentType`` half of a social/comment key."""

    HERO = "hero"
    NEWS = "news"
    PLAYER = "player"
    GALLERY = "gallery"


class RegistrationStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class User(TimestampedBase):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column('password', String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SqlEnum(UserRole, name="user_role", native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=UserRole.ADMIN,
    )

    def set_password(self, password: str) -> None:
        self.password_hash = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode('utf-8'), self.password_hash.encode('utf-8'))
        except ValueError:
            return False


class HeroSlide(TimestampedBase):
    __tablename__ = "hero_slides"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Display string such as "15 MAR, 2024"; never parsed
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class NewsArticle(TimestampedBase):
    __tablename__ = "news_articles"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)


class Player(TimestampedBase):
    __tablename__ = "players"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    jersey_number: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    is_captain: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    stats: Mapped["PlayerStats | None"] = relationship(
        back_populates="player",
        uselist=False,
        cascade="all, delete-orphan",
    )


class PlayerStats(TimestampedBase):
    __tablename__ = "player_stats"

    player_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    # Batting
    matches: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    runs_scored: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    balls_faced: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    fours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sixes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Bowling
    wickets_taken: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    balls_bowled: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    runs_conceded: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Fielding
    catches: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    run_outs: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stumpings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    player: Mapped[Player] = relationship(back_populates="stats")


class GalleryItem(TimestampedBase):
    __tablename__ = "gallery_items"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    category: Mapped[str] = mapped_column(String(64), nullable=False, default="Photos")
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)


class SocialInteraction(TimestampedBase):
    """Like/dislike/share counters for one piece of content.

    Keyed by ``(content_type, content_id)`` rather than a foreign key so a
    single ledger can serve every content table.
    """

    __tablename__ = "social_interactions"
    __table_args__ = (
        UniqueConstraint("content_type", "content_id", name="uq_social_interactions_content"),
        IDENTITY_TABLE_ARGS,
    )

    content_type: Mapped[str] = mapped_column(String(32), nullable=False)
    content_id: Mapped[int] = mapped_column(Integer, nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dislikes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    shares: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class Comment(TimestampedBase):
    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_content", "content_type", "content_id"),
        IDENTITY_TABLE_ARGS,
    )

    content_type: Mapped[str] = mapped_column(String(32), nullable=False)
    content_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Not incremented by any endpoint; kept so existing rows keep their shape
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dislikes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class PlayerRegistration(TimestampedBase):
    __tablename__ = "player_registrations"
    __table_args__ = (
        Index("ix_player_registrations_status", "status"),
        IDENTITY_TABLE_ARGS,
    )

    # Personal details
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    date_of_birth: Mapped[str] = mapped_column(String(32), nullable=False)

    # Cricket preferences
    position: Mapped[str] = mapped_column(String(64), nullable=False)
    batting_style: Mapped[str | None] = mapped_column(String(64))
    bowling_style: Mapped[str | None] = mapped_column(String(64))
    experience: Mapped[str | None] = mapped_column(Text)
    previous_teams: Mapped[str | None] = mapped_column(Text)

    # Emergency contact
    emergency_contact_name: Mapped[str | None] = mapped_column(String(255))
    emergency_contact_phone: Mapped[str | None] = mapped_column(String(32))

    motivation: Mapped[str | None] = mapped_column(Text)

    status: Mapped[RegistrationStatus] = mapped_column(
        SqlEnum(
            RegistrationStatus,
            name="registration_status",
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
        default=RegistrationStatus.PENDING,
    )


__all__ = [
    "IDENTITY_TABLE_ARGS",
    "INT_MIN",
    "INT_MAX",
    "TimestampedBase",
    "UserRole",
    "ContentType",
    "RegistrationStatus",
    "User",
    "HeroSlide",
    "NewsArticle",
    "Player",
    "PlayerStats",
    "GalleryItem",
    "SocialInteraction",
    "Comment",
    "PlayerRegistration",
]
