import pytest

from tuskers import create_app
from tuskers.config import Config
from tuskers.extensions import db
from tuskers.models import User, UserRole

ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 'TestPass123!'


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    AUTH_TOKEN_SECRET = 'test-token-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTO_CREATE_TABLES = False


@pytest.fixture()
def app():
    """Create and configure a test application instance.

    Requests must run outside of a pushed app context, otherwise they share
    ``g`` and Flask-Login would keep the first request's user.
    """
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_user(app):
    """Create the admin account and return its id."""
    with app.app_context():
        user = User(username=ADMIN_USERNAME, role=UserRole.ADMIN)
        user.set_password(ADMIN_PASSWORD)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture()
def auth_token(client, admin_user):
    response = client.post('/api/auth/login', json={
        'username': ADMIN_USERNAME,
        'password': ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return response.get_json()['token']


@pytest.fixture()
def auth_headers(auth_token):
    return {'Authorization': f'Bearer {auth_token}'}


@pytest.fixture()
def file_backed_app(tmp_path):
    """App on a SQLite file so worker threads get their own connections."""

    class FileBackedConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'tuskers.db'}"

    app = create_app(FileBackedConfig)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()
