"""Shared pytest fixtures backed by in-memory MongoDB databases."""

from __future__ import annotations

import sys
from pathlib import Path

import mongomock
import pytest
from werkzeug.security import generate_password_hash

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jorge import database  # noqa: E402
from jorge.main import create_app  # noqa: E402

TEST_HOST = "example_com"
TEST_ADMIN = "bob"


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture(autouse=True)
def mongo_db(monkeypatch: pytest.MonkeyPatch, mongo_client):
    """Provide isolated archive and ejabberd databases for each test."""
    archive_db = mongo_client["test_mod_logdb"]
    ejabberd_db = mongo_client["test_ejabberd"]

    monkeypatch.setattr(database, "get_mongo_client", lambda: mongo_client)
    monkeypatch.setattr(database, "get_database", lambda: archive_db)
    monkeypatch.setattr(database, "get_ejabberd_database", lambda: ejabberd_db)

    yield archive_db

    mongo_client.drop_database("test_mod_logdb")
    mongo_client.drop_database("test_ejabberd")


@pytest.fixture
def ejabberd_db(mongo_db, mongo_client):
    return mongo_client["test_ejabberd"]


@pytest.fixture
def app():
    return create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "ADMIN_NAME": TEST_ADMIN,
            "XMPP_HOST": TEST_HOST,
            "DEFAULT_LANGUAGE": "eng",
            "SEARCH_PAGE_SIZE": 2,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(mongo_db, ejabberd_db):
    """Create an ejabberd account and, when ``user_id`` is given, its archive record."""

    def _make_user(username, user_id=None, password="secret", enabled=True):
        ejabberd_db.users.insert_one(
            {
                "username": username,
                "host": TEST_HOST,
                "password": generate_password_hash(password),
            }
        )
        if user_id is not None:
            mongo_db.jorge_users.insert_one(
                {
                    "username": username,
                    "host": TEST_HOST,
                    "user_id": user_id,
                    "enabled": enabled,
                }
            )

    return _make_user


@pytest.fixture
def log_in(client):
    """Seed the test client's session as if the user had logged in."""

    def _log_in(uid, language="eng", enabled="t", log_status="1"):
        with client.session_transaction() as sess:
            sess["uid"] = uid
            sess["language"] = language
            sess["enabled"] = enabled
            sess["log_status"] = log_status

    return _log_in
