"""Admin login endpoint."""

from __future__ import annotations

from flask import Blueprint, jsonify

from tuskers.forms import LoginForm, validate_payload
from tuskers.services import auth as auth_service

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    form = validate_payload(LoginForm)
    return jsonify(auth_service.login(form.username.data, form.password.data))
