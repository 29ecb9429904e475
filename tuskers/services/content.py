"""CRUD services for the site's public content collections."""

from __future__ import annotations

from typing import Any

from tuskers.models import GalleryItem, HeroSlide, NewsArticle, Player
from tuskers.services.crud import CRUDService

hero_slides: CRUDService[HeroSlide] = CRUDService(
    HeroSlide,
    visibility_flag='is_active',
    ordering=(HeroSlide.order.asc(), HeroSlide.created_at.asc(), HeroSlide.id.asc()),
    label='Hero slide',
)

news_articles: CRUDService[NewsArticle] = CRUDService(
    NewsArticle,
    visibility_flag='is_published',
    ordering=(NewsArticle.created_at.desc(), NewsArticle.id.desc()),
    label='Article',
)

players: CRUDService[Player] = CRUDService(
    Player,
    visibility_flag='is_active',
    ordering=(Player.jersey_number.asc(), Player.id.asc()),
    label='Player',
)

gallery_items: CRUDService[GalleryItem] = CRUDService(
    GalleryItem,
    visibility_flag='is_visible',
    ordering=(GalleryItem.created_at.desc(), GalleryItem.id.desc()),
    label='Gallery item',
)


def _timestamp(value) -> str | None:
    return value.isoformat() if value else None


def serialize_hero_slide(slide: HeroSlide) -> dict[str, Any]:
    return {
        'id': slide.id,
        'title': slide.title,
        'description': slide.description,
        'date': slide.date,
        'image': slide.image,
        'isActive': slide.is_active,
        'order': slide.order,
        'createdAt': _timestamp(slide.created_at),
    }


def serialize_news_article(article: NewsArticle) -> dict[str, Any]:
    return {
        'id': article.id,
        'title': article.title,
        'description': article.description,
        'content': article.content,
        'date': article.date,
        'image': article.image,
        'isPublished': article.is_published,
        'createdAt': _timestamp(article.created_at),
    }


def serialize_player(player: Player) -> dict[str, Any]:
    return {
        'id': player.id,
        'name': player.name,
        'role': player.role,
        'jerseyNumber': player.jersey_number,
        'image': player.image,
        'isCaptain': player.is_captain,
        'isActive': player.is_active,
        'createdAt': _timestamp(player.created_at),
    }


def serialize_gallery_item(item: GalleryItem) -> dict[str, Any]:
    return {
        'id': item.id,
        'title': item.title,
        'image': item.image,
        'category': item.category,
        'date': item.date,
        'isVisible': item.is_visible,
        'createdAt': _timestamp(item.created_at),
    }


__all__ = [
    'hero_slides',
    'news_articles',
    'players',
    'gallery_items',
    'serialize_hero_slide',
    'serialize_news_article',
    'serialize_player',
    'serialize_gallery_item',
]
