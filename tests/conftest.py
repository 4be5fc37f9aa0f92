import pytest

from santapair import create_app
from santapair.extensions import db
from santapair.services.participants import InMemoryParticipantStore


class ScriptedRandom:
    """Stands in for random.Random; hands out pre-chosen indices in order."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def randrange(self, n):
        value = self.draws[self.calls]
        self.calls += 1
        assert 0 <= value < n
        return value


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "WTF_CSRF_ENABLED": False,
        "SECRET_KEY": "test",
    })
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_store():
    return InMemoryParticipantStore()
