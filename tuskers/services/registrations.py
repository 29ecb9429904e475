"""Player registration applications and their review status."""

from __future__ import annotations

from typing import Any

from flask import current_app

from tuskers.errors import ValidationError
from tuskers.extensions import db
from tuskers.models import PlayerRegistration, RegistrationStatus
from tuskers.services.crud import CRUDService


class RegistrationService(CRUDService[PlayerRegistration]):
    def __init__(self):
        super().__init__(
            PlayerRegistration,
            ordering=(PlayerRegistration.created_at.desc(), PlayerRegistration.id.desc()),
            label='Registration',
        )

    def submit(self, data: dict[str, Any]) -> PlayerRegistration:
        """Store a public application; it always starts as pending."""
        fields = {key: value for key, value in self._clean(data).items() if key != 'status'}
        registration = self.model(status=RegistrationStatus.PENDING, **fields)
        db.session.add(registration)
        self._commit('create')
        current_app.logger.info(f"Registration {registration.id} submitted")
        return registration

    def update_status(self, registration_id: int, status: RegistrationStatus | str) -> PlayerRegistration:
        """
        Move a registration to ``status``.

        Any of pending/approved/rejected may follow any other; nothing moves
        a registration except this call.
        """
        if not isinstance(status, RegistrationStatus):
            try:
                status = RegistrationStatus(status)
            except ValueError:
                raise ValidationError("Invalid status") from None
        return self.update(registration_id, {'status': status})


def serialize_registration(registration: PlayerRegistration) -> dict[str, Any]:
    return {
        'id': registration.id,
        'firstName': registration.first_name,
        'lastName': registration.last_name,
        'email': registration.email,
        'phone': registration.phone,
        'dateOfBirth': registration.date_of_birth,
        'position': registration.position,
        'battingStyle': registration.batting_style,
        'bowlingStyle': registration.bowling_style,
        'experience': registration.experience,
        'previousTeams': registration.previous_teams,
        'emergencyContactName': registration.emergency_contact_name,
        'emergencyContactPhone': registration.emergency_contact_phone,
        'motivation': registration.motivation,
        'status': registration.status.value if hasattr(registration.status, 'value') else registration.status,
        'createdAt': registration.created_at.isoformat() if registration.created_at else None,
    }


registrations = RegistrationService()


__all__ = ['RegistrationService', 'registrations', 'serialize_registration']
