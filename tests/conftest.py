"""Shared fixtures for the chore tracker tests.

Environment is set before any server module is imported, because
importing main builds the module-level app from the environment.
"""

import os

os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core.chores import MemoryChoreStore, SqlChoreStore
from core.credentials import MemoryCredentialStore, SqlCredentialStore, make_password_context
from database import create_db_engine, create_session_factory, init_db


@pytest.fixture
def pwd_context():
    # Lowest bcrypt cost keeps the suite fast.
    return make_password_context(rounds=4)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'chores.db'}")
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def credential_store(request, pwd_context):
    if request.param == "memory":
        return MemoryCredentialStore(pwd_context)
    return SqlCredentialStore(request.getfixturevalue("session_factory"), pwd_context)


@pytest.fixture(params=["memory", "sql"])
def chore_store(request):
    if request.param == "memory":
        return MemoryChoreStore()
    return SqlChoreStore(request.getfixturevalue("session_factory"))


@pytest.fixture(params=["memory", "sql"])
def settings(request, tmp_path):
    return Settings(
        session_secret="test-secret",
        bcrypt_rounds=4,
        store_backend=request.param,
        database_url=f"sqlite:///{tmp_path / 'app.db'}",
    )


@pytest.fixture
def client(settings):
    from main import create_app
    with TestClient(create_app(settings), follow_redirects=False) as c:
        yield c
