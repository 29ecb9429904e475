"""Admin dashboard reads that bypass the public visibility flags."""

from __future__ import annotations

from flask import Blueprint, jsonify

from tuskers.auth import admin_required
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

admin_bp = Blueprint('admin', __name__)


@admin_bp.before_request
@admin_required
def require_admin():
    """Every route on this blueprint needs a bearer token."""
    return None


@admin_bp.route('/hero-slides', methods=['GET'])
def list_hero_slides():
    return jsonify([serialize_hero_slide(s) for s in hero_slides.list(include_hidden=True)])


@admin_bp.route('/news', methods=['GET'])
def list_news():
    return jsonify([serialize_news_article(a) for a in news_articles.list(include_hidden=True)])


@admin_bp.route('/news/<id:article_id>', methods=['GET'])
def get_news_article(article_id: int):
    return jsonify(serialize_news_article(news_articles.get(article_id, include_hidden=True)))


@admin_bp.route('/players', methods=['GET'])
def list_players():
    return jsonify([serialize_player(p) for p in players.list(include_hidden=True)])


@admin_bp.route('/gallery', methods=['GET'])
def list_gallery():
    return jsonify([serialize_gallery_item(i) for i in gallery_items.list(include_hidden=True)])
