from urllib.parse import urlsplit

import pytest
import requests

from app import create_app
from app.config import TestingConfig
from app.extensions import db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    """Create a user through the API and return its JSON."""
    def _make_user(username='myusername', **fields):
        body = dict(fields, username=username)
        response = client.post('/user', json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _make_user


class FlaskResponse:
    """Gives a test client response the parts of the requests API we use."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        return self._response.get_json()

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)


class FlaskSession:
    """Routes PrescriptionsAPI calls into the Flask test client."""

    def __init__(self, client):
        self.client = client

    @staticmethod
    def _target(url):
        parts = urlsplit(url)
        return parts.path + (f'?{parts.query}' if parts.query else '')

    def get(self, url, timeout=None):
        return FlaskResponse(self.client.get(self._target(url)))

    def post(self, url, json=None, timeout=None):
        return FlaskResponse(self.client.post(self._target(url), json=json))


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
