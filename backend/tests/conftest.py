import importlib
import os

import pytest
from fastapi.testclient import TestClient

# must be in place before ainotes.utils.auth_hash is first imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "dev-secret-for-tests")

PASSWORD = "StrongPassw0rd!"


class FakeLLM:
    """Stands in for GeminiClient: records prompts, returns a canned reply."""

    def __init__(self, reply="<p>ok</p>", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate the database per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'notes.db'}")
    monkeypatch.setenv("JWT_SECRET", "dev-secret-for-tests")
    monkeypatch.setenv("JWT_EXP_MINUTES", "15")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    # reload modules so that the module-level stores pick up the new database
    import ainotes.storage.database
    import ainotes.utils.jwt_auth
    import ainotes.api.auth
    import ainotes.api.notes
    import ainotes.api.ai
    import ainotes.main
    for module in (
        ainotes.storage.database,
        ainotes.utils.jwt_auth,
        ainotes.api.auth,
        ainotes.api.notes,
        ainotes.api.ai,
        ainotes.main,
    ):
        importlib.reload(module)

    with TestClient(ainotes.main.app) as c:
        yield c
    ainotes.main.app.dependency_overrides.clear()


@pytest.fixture()
def login(client):
    """Register a user and return the auth headers of a fresh token."""

    def _login(user_id: str) -> dict:
        r = client.post("/auth/register", json={"user_id": user_id, "password": PASSWORD})
        assert r.status_code == 201
        r = client.post("/auth/login", json={"user_id": user_id, "password": PASSWORD})
        assert r.status_code == 200
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _login


@pytest.fixture()
def fake_llm(client):
    import ainotes.api.ai
    import ainotes.main

    llm = FakeLLM()
    ainotes.main.app.dependency_overrides[ainotes.api.ai.get_llm] = lambda: llm
    return llm


@pytest.fixture()
def db(tmp_path):
    from ainotes.storage.database import Database

    database = Database(f"sqlite:///{tmp_path / 'store.db'}")
    database.create_tables()
    yield database
    database.dispose()


@pytest.fixture()
def store(db):
    from ainotes.storage.notes_store import NotesStore

    return NotesStore(db)
