import pytest

from contactdesk import create_app
from contactdesk.extensions import db as _db


@pytest.fixture(scope="function")
def app():
    app = create_app("testing")
    with app.app_context():
        yield app
        _db.session.remove()
        app.extensions["contact_store"].close()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def store(app):
    return app.extensions["contact_store"]


@pytest.fixture
def jane():
    return {
        "name": "Jane Smith",
        "email": "JANE@Example.com",
        "subject": "Support",
        "message": "Hello, this is a test message.",
    }
