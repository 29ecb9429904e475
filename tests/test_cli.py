"""Admin account CLI commands."""

from tuskers.extensions import db
from tuskers.models import User, UserRole


class TestUserCommands:

    def test_create_user(self, app):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['user', 'create', '--username', 'captain', '--password', 'Tuskers2024'])

        assert result.exit_code == 0
        assert 'User created successfully!' in result.output
        with app.app_context():
            user = db.session.query(User).filter_by(username='captain').one()
            assert user.role is UserRole.ADMIN
            assert user.check_password('Tuskers2024')

    def test_create_refuses_duplicate(self, app, admin_user):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['user', 'create', '--username', 'admin', '--password', 'Tuskers2024'])

        assert 'already exists' in result.output
        with app.app_context():
            assert db.session.query(User).count() == 1

    def test_create_refuses_weak_password(self, app):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['user', 'create', '--username', 'captain', '--password', 'short'])

        assert 'at least 8 characters' in result.output
        with app.app_context():
            assert db.session.query(User).count() == 0

    def test_set_password(self, app, admin_user, client):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['user', 'set-password', '--username', 'admin', '--password', 'NewPass4567'])

        assert 'Password updated.' in result.output
        response = client.post('/api/auth/login', json={'username': 'admin', 'password': 'NewPass4567'})
        assert response.status_code == 200

    def test_set_password_unknown_user(self, app):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['user', 'set-password', '--username', 'ghost', '--password', 'NewPass4567'])

        assert 'No user ghost found' in result.output
