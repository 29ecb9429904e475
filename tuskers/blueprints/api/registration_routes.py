"""Player registration applications."""

from __future__ import annotations

from flask import Blueprint, jsonify

from tuskers.auth import admin_required
from tuskers.forms import PlayerRegistrationForm, RegistrationStatusForm, validate_payload
from tuskers.services.registrations import registrations, serialize_registration

registration_bp = Blueprint('registrations', __name__)


@registration_bp.route('/registrations', methods=['GET'])
@admin_required
def list_registrations():
    return jsonify([serialize_registration(r) for r in registrations.list()])


@registration_bp.route('/registrations', methods=['POST'])
def submit_registration():
    form = validate_payload(PlayerRegistrationForm)
    registration = registrations.submit(form.data)
    return jsonify(serialize_registration(registration)), 201


@registration_bp.route('/registrations/<id:registration_id>/status', methods=['PUT'])
@admin_required
def update_registration_status(registration_id: int):
    form = validate_payload(RegistrationStatusForm)
    registration = registrations.update_status(registration_id, form.status.data)
    return jsonify(serialize_registration(registration))
