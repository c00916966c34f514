"""
Pytest configuration and fixtures for the API tests
"""
from datetime import datetime, timezone

import mongomock
import pytest

from eventhub import create_app
from eventhub.config import TestConfig
from eventhub.events.models import Event


@pytest.fixture(scope='function')
def mongo_client():
    """In-memory MongoDB client, fresh for every test"""
    return mongomock.MongoClient()


@pytest.fixture(scope='function')
def app(mongo_client):
    """Create Flask application for testing"""
    app = create_app(TestConfig, mongo_client=mongo_client)

    with app.app_context():
        yield app


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def db(app):
    return app.extensions["mongo_db"]


@pytest.fixture(scope='function')
def event_repo(app):
    return app.extensions["event_repository"]


@pytest.fixture(scope='function')
def participant_repo(app):
    return app.extensions["participant_repository"]


@pytest.fixture(scope='function')
def registration(app):
    return app.extensions["registration_service"]


@pytest.fixture(scope='function')
def make_event(event_repo):
    """Factory storing an event through the repository"""
    def _make_event(nome="Launch"):
        return event_repo.create(Event(
            nome=nome,
            descricao=f"{nome} description",
            data=datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc),
            endereco="Av. Paulista, 1000",
            background_color="#00ADD8",
            text_color="#FFFFFF",
        ))
    return _make_event
