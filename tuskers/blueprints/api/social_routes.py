"""Public engagement counters and comments."""

from __future__ import annotations

from flask import Blueprint, jsonify

from tuskers.auth import admin_required
from tuskers.blueprints.common import parse_content_type
from tuskers.forms import CommentForm, validate_payload
from tuskers.services.comments import comment_ledger, serialize_comment
from tuskers.services.social import social_ledger

social_bp = Blueprint('social', __name__)


@social_bp.route('/social/<content_type>/<id:content_id>', methods=['GET'])
def get_interactions(content_type: str, content_id: int):
    return jsonify(social_ledger.get(parse_content_type(content_type), content_id))


@social_bp.route('/social/<content_type>/<id:content_id>/like', methods=['POST'])
def like(content_type: str, content_id: int):
    return jsonify(social_ledger.increment_likes(parse_content_type(content_type), content_id))


@social_bp.route('/social/<content_type>/<id:content_id>/dislike', methods=['POST'])
def dislike(content_type: str, content_id: int):
    return jsonify(social_ledger.increment_dislikes(parse_content_type(content_type), content_id))


@social_bp.route('/social/<content_type>/<id:content_id>/share', methods=['POST'])
def share(content_type: str, content_id: int):
    return jsonify(social_ledger.increment_shares(parse_content_type(content_type), content_id))


@social_bp.route('/comments/<content_type>/<id:content_id>', methods=['GET'])
def list_comments(content_type: str, content_id: int):
    comments = comment_ledger.list_for(parse_content_type(content_type), content_id)
    return jsonify([serialize_comment(c) for c in comments])


@social_bp.route('/comments', methods=['POST'])
def post_comment():
    form = validate_payload(CommentForm)
    comment = comment_ledger.post(
        form.content_type.data,
        form.content_id.data,
        form.user_name.data,
        form.text.data,
    )
    return jsonify(serialize_comment(comment)), 201


@social_bp.route('/comments/<id:comment_id>', methods=['DELETE'])
@admin_required
def delete_comment(comment_id: int):
    comment_ledger.delete(comment_id)
    return '', 204
