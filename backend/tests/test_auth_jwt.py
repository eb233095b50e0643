from conftest import PASSWORD

from ainotes.utils import jwt_auth


def test_register_login_token_returned(client):
    r = client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    assert r.status_code == 201

    r = client.post("/auth/login", json={"user_id": "userA", "password": PASSWORD})
    assert r.status_code == 200
    data = r.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"
    assert jwt_auth.decode_token(data["access_token"])["sub"] == "userA"


def test_register_twice_conflicts(client):
    client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    r = client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    assert r.status_code == 409


def test_login_wrong_password(client):
    client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    r = client.post("/auth/login", json={"user_id": "userA", "password": "wrongwrongwrong"})
    assert r.status_code == 401


def test_login_unknown_user(client):
    r = client.post("/auth/login", json={"user_id": "nobody", "password": PASSWORD})
    assert r.status_code == 401


def test_invalid_user_id_is_rejected(client):
    r = client.post("/auth/register", json={"user_id": "../etc", "password": PASSWORD})
    assert r.status_code == 422


def test_reads_require_token(client, login):
    r = client.get("/notes")
    assert r.status_code == 401

    r = client.get("/notes", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    r = client.get("/notes", headers=login("userA"))
    assert r.status_code == 200


def test_token_for_unknown_user_is_ignored(client):
    # validly signed, but the account does not exist
    token = jwt_auth.create_access_token(subject="ghost")
    r = client.get("/notes", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_expired_token_is_rejected(client, monkeypatch):
    client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    monkeypatch.setenv("JWT_EXP_MINUTES", "-1")
    token = jwt_auth.create_access_token(subject="userA")

    r = client.get("/notes", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_token_signed_with_other_secret_is_rejected(client, monkeypatch):
    client.post("/auth/register", json={"user_id": "userA", "password": PASSWORD})
    monkeypatch.setenv("JWT_SECRET", "attacker-secret")
    forged = jwt_auth.create_access_token(subject="userA")
    monkeypatch.setenv("JWT_SECRET", "dev-secret-for-tests")

    r = client.get("/notes", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401
    r = client.post("/notes", headers={"Authorization": f"Bearer {forged}"}, json={"id": "n1"})
    assert r.json()["error_message"] == "You must be logged in to create a note"
