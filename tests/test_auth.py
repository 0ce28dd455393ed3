# tests/test_auth.py
import jwt


def test_login_returns_token_with_user_claims(client, user):
    res = client.post("/api/auth/login", json={"username": "alice", "password": "secret1"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    claims = jwt.decode(body["data"]["token"], "test-secret", algorithms=["HS256"])
    assert claims["userId"] == user.id
    assert claims["username"] == "alice"
    assert claims["role"] == "user"
    assert body["data"]["user"] == {"id": user.id, "username": "alice", "email": "alice@example.com", "role": "user"}


def test_wrong_password_and_unknown_user_get_the_same_401(client, user):
    wrong = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})
    unknown = client.post("/api/auth/login", json={"username": "bob", "password": "nope"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"success": False, "data": None, "error": "Invalid credentials"}


def test_login_requires_both_fields(client):
    res = client.post("/api/auth/login", json={"username": "alice"})
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required fields: password"


def test_me_needs_a_valid_token(client, user):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer junk"}).status_code == 401

    token = client.post("/api/auth/login", json={"username": "alice", "password": "secret1"}).json()["data"]["token"]
    res = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json()["data"]["username"] == "alice"


def test_user_admin_is_admin_only(client, user, admin_headers):
    token = client.post("/api/auth/login", json={"username": "alice", "password": "secret1"}).json()["data"]["token"]
    assert client.get("/api/users", headers={"Authorization": f"Bearer {token}"}).status_code == 403

    res = client.post("/api/users", headers=admin_headers, json={
        "username": "carol", "email": "carol@example.com", "password": "longenough", "role": "accountant",
    })
    assert res.status_code == 201
    assert res.json()["data"]["role"] == "accountant"

    dup = client.post("/api/users", headers=admin_headers, json={
        "username": "carol", "email": "other@example.com", "password": "longenough",
    })
    assert dup.status_code == 400
    assert dup.json()["error"] == "Username already in use"

    login = client.post("/api/auth/login", json={"username": "carol", "password": "longenough"})
    assert login.status_code == 200
