import pytest

from app import app as flask_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv('FLAG', raising=False)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
