import pytest

from api import create_app
from database import Database
from history_manager import HistoryStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "history.db")


@pytest.fixture
def db(db_path):
    return Database(db_path)


@pytest.fixture
def history(db):
    return HistoryStore(db)


@pytest.fixture
def app(db_path):
    app = create_app(db_path)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
