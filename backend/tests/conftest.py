import os
import sys
import pytest

# Ensure the backend root (containing the `facematch` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from facematch import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    AUTO_CREATE_TABLES = False
    CORS_ORIGINS = ['http://localhost:5173']
    MIN_PHOTOS = 4
    ALERT_THRESHOLD_PERCENT = 50
    SESSION_MAX_AGE_SEC = 0
    ALERT_RECIPIENTS = {'familyEmail': 'family@example.com'}
    SMTP_HOST = None


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import facematch.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_user(flask_app):
    from facematch.models import User

    def _make(username='alice', password='password'):
        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture()
def add_photos():
    from facematch.models import Photo

    def _add(user, labels):
        photos = []
        for label in labels:
            photo = Photo(url=f'https://img.example/{label}.jpg', label=label, user_id=user.id)
            db.session.add(photo)
            photos.append(photo)
        db.session.commit()
        return photos
    return _add


@pytest.fixture()
def signed_in(client, make_user):
    """A client signed in as a fresh user; returns (client, user)."""
    user = make_user()
    res = client.post('/signin', data={'username': 'alice', 'password': 'password'})
    assert res.status_code == 302
    return client, user


@pytest.fixture()
def sent_alerts(monkeypatch):
    calls = []

    def _fake_send(recipient_key, subject, body):
        calls.append((recipient_key, subject, body))

    monkeypatch.setattr('facematch.services.mailer.send_email', _fake_send)
    return calls


@pytest.fixture()
def sio_client(flask_app, signed_in):
    http_client, _ = signed_in
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=http_client,
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
