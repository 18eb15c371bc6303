import pytest

from clinic import create_app
from clinic.config import TestConfig
from clinic.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    client = app.test_client()
    client.set_cookie(app.config['ADMIN_COOKIE_NAME'], app.config['ADMIN_COOKIE_VALUE'])
    return client
