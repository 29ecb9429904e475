"""Player registration applications and status review."""

import logging

import pytest

from tuskers.errors import NotFound, ValidationError
from tuskers.models import RegistrationStatus
from tuskers.services.registrations import registrations


def _application(**overrides):
    payload = {
        'firstName': 'Kiran',
        'lastName': 'Shah',
        'email': 'kiran@example.com',
        'phone': '+1 555 0100',
        'dateOfBirth': '2001-04-12',
        'position': 'Wicket-keeper',
        'battingStyle': 'Right-handed',
        'motivation': 'Love the game',
    }
    payload.update(overrides)
    return payload


class TestRegistrationApi:

    def test_submission_starts_pending(self, client):
        response = client.post('/api/registrations', json=_application(status='approved'))

        assert response.status_code == 201
        body = response.get_json()
        assert body['status'] == 'pending'
        assert body['firstName'] == 'Kiran'
        assert body['bowlingStyle'] is None

    def test_submission_log_names_only_the_id(self, client, caplog):
        with caplog.at_level(logging.INFO, logger='tuskers'):
            created = client.post('/api/registrations', json=_application()).get_json()

        assert f"Registration {created['id']} submitted" in caplog.text
        for detail in ('Kiran', 'Shah', 'kiran@example.com', '+1 555 0100'):
            assert detail not in caplog.text

    @pytest.mark.parametrize('overrides', [
        {'email': 'not-an-email'},
        {'firstName': ''},
        {'position': None},
    ])
    def test_invalid_submission(self, client, overrides):
        response = client.post('/api/registrations', json=_application(**overrides))

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid registration data'

    def test_list_is_admin_only_and_newest_first(self, client, auth_headers):
        first = client.post('/api/registrations', json=_application(firstName='A')).get_json()
        second = client.post('/api/registrations', json=_application(firstName='B')).get_json()

        assert client.get('/api/registrations').status_code == 401

        listed = client.get('/api/registrations', headers=auth_headers).get_json()
        assert [r['id'] for r in listed] == [second['id'], first['id']]

    def test_status_transitions(self, client, auth_headers):
        created = client.post('/api/registrations', json=_application()).get_json()
        url = f"/api/registrations/{created['id']}/status"

        approved = client.put(url, json={'status': 'approved'}, headers=auth_headers)
        assert approved.status_code == 200
        assert approved.get_json()['status'] == 'approved'

        back = client.put(url, json={'status': 'pending'}, headers=auth_headers)
        assert back.get_json()['status'] == 'pending'

    def test_invalid_status(self, client, auth_headers):
        created = client.post('/api/registrations', json=_application()).get_json()

        response = client.put(
            f"/api/registrations/{created['id']}/status",
            json={'status': 'waitlisted'},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid status'

    def test_status_for_missing_registration(self, client, auth_headers):
        response = client.put('/api/registrations/9/status', json={'status': 'rejected'}, headers=auth_headers)

        assert response.status_code == 404
        assert response.get_json() == {'message': 'Registration not found'}


class TestRegistrationService:

    def test_update_status_rejects_unknown_value(self, app):
        with app.app_context():
            registration = registrations.submit({
                'first_name': 'Dev',
                'last_name': 'Rao',
                'email': 'dev@example.com',
                'phone': '1',
                'date_of_birth': '2000-01-01',
                'position': 'Bowler',
                'status': RegistrationStatus.APPROVED,
            })
            assert registration.status is RegistrationStatus.PENDING

            with pytest.raises(ValidationError):
                registrations.update_status(registration.id, 'archived')

            updated = registrations.update_status(registration.id, RegistrationStatus.REJECTED)
            assert updated.status is RegistrationStatus.REJECTED

    def test_update_status_missing(self, app):
        with app.app_context():
            with pytest.raises(NotFound):
                registrations.update_status(3, 'approved')
