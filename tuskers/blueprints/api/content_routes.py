"""Public reads and admin writes for site content."""

from __future__ import annotations

from flask import Blueprint, jsonify

from tuskers.auth import admin_required
from tuskers.blueprints.common import parse_limit
from tuskers.forms import (
    GalleryItemForm,
    HeroSlideForm,
    NewsArticleForm,
    PlayerForm,
    PlayerStatsForm,
    validate_payload,
)
from tuskers.services.content import (
    gallery_items,
    hero_slides,
    news_articles,
    players,
    serialize_gallery_item,
    serialize_hero_slide,
    serialize_news_article,
    serialize_player,
)
from tuskers.services.players import (
    get_players_with_stats,
    player_stats,
    serialize_player_stats,
    serialize_player_with_stats,
)
from tuskers.services.statistics import get_team_statistics

content_bp = Blueprint('content', __name__)


# Hero slides

@content_bp.route('/hero-slides', methods=['GET'])
def list_hero_slides():
    return jsonify([serialize_hero_slide(s) for s in hero_slides.list()])


@content_bp.route('/hero-slides', methods=['POST'])
@admin_required
def create_hero_slide():
    form = validate_payload(HeroSlideForm)
    slide = hero_slides.create(form.data)
    return jsonify(serialize_hero_slide(slide)), 201


@content_bp.route('/hero-slides/<id:slide_id>', methods=['PUT'])
@admin_required
def update_hero_slide(slide_id: int):
    form = validate_payload(HeroSlideForm)
    return jsonify(serialize_hero_slide(hero_slides.update(slide_id, form.data)))


@content_bp.route('/hero-slides/<id:slide_id>', methods=['DELETE'])
@admin_required
def delete_hero_slide(slide_id: int):
    hero_slides.delete(slide_id)
    return '', 204


# News

@content_bp.route('/news', methods=['GET'])
def list_news():
    articles = news_articles.list(limit=parse_limit())
    return jsonify([serialize_news_article(a) for a in articles])


@content_bp.route('/news/<id:article_id>', methods=['GET'])
def get_news_article(article_id: int):
    article = news_articles.get(article_id, include_hidden=False)
    return jsonify(serialize_news_article(article))


@content_bp.route('/news', methods=['POST'])
@admin_required
def create_news_article():
    form = validate_payload(NewsArticleForm)
    article = news_articles.create(form.data)
    return jsonify(serialize_news_article(article)), 201


@content_bp.route('/news/<id:article_id>', methods=['PUT'])
@admin_required
def update_news_article(article_id: int):
    form = validate_payload(NewsArticleForm)
    return jsonify(serialize_news_article(news_articles.update(article_id, form.data)))


@content_bp.route('/news/<id:article_id>', methods=['DELETE'])
@admin_required
def delete_news_article(article_id: int):
    news_articles.delete(article_id)
    return '', 204


# Players

@content_bp.route('/players', methods=['GET'])
def list_players():
    return jsonify([serialize_player(p) for p in players.list()])


@content_bp.route('/players/with-stats', methods=['GET'])
def list_players_with_stats():
    return jsonify([serialize_player_with_stats(p, s) for p, s in get_players_with_stats()])


@content_bp.route('/players', methods=['POST'])
@admin_required
def create_player():
    form = validate_payload(PlayerForm)
    player = players.create(form.data)
    return jsonify(serialize_player(player)), 201


@content_bp.route('/players/<id:player_id>', methods=['PUT'])
@admin_required
def update_player(player_id: int):
    form = validate_payload(PlayerForm)
    return jsonify(serialize_player(players.update(player_id, form.data)))


@content_bp.route('/players/<id:player_id>', methods=['DELETE'])
@admin_required
def delete_player(player_id: int):
    players.delete(player_id)
    return '', 204


@content_bp.route('/players/<id:player_id>/stats', methods=['PUT'])
@admin_required
def upsert_player_stats(player_id: int):
    form = validate_payload(PlayerStatsForm)
    stats = player_stats.upsert(player_id, form.data)
    return jsonify(serialize_player_stats(stats))


# Gallery

@content_bp.route('/gallery', methods=['GET'])
def list_gallery():
    items = gallery_items.list(limit=parse_limit())
    return jsonify([serialize_gallery_item(i) for i in items])


@content_bp.route('/gallery', methods=['POST'])
@admin_required
def create_gallery_item():
    form = validate_payload(GalleryItemForm)
    item = gallery_items.create(form.data)
    return jsonify(serialize_gallery_item(item)), 201


@content_bp.route('/gallery/<id:item_id>', methods=['PUT'])
@admin_required
def update_gallery_item(item_id: int):
    form = validate_payload(GalleryItemForm)
    return jsonify(serialize_gallery_item(gallery_items.update(item_id, form.data)))


@content_bp.route('/gallery/<id:item_id>', methods=['DELETE'])
@admin_required
def delete_gallery_item(item_id: int):
    gallery_items.delete(item_id)
    return '', 204


# Team statistics

@content_bp.route('/stats/team', methods=['GET'])
def team_statistics():
    return jsonify(get_team_statistics())
