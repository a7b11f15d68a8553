import uuid


def test_create_user_returns_201_without_password(client):
    resp = client.post(
        "/users",
        json={"name": "Maria Silva", "email": "maria@example.com", "password": "secret123"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert uuid.UUID(body["id"])
    assert body["name"] == "Maria Silva"
    assert body["email"] == "maria@example.com"
    assert "password" not in body
    assert body["createdAt"] is not None
    assert body["updatedAt"] is not None


def test_create_user_with_taken_email_is_conflict(client, make_user):
    make_user(email="taken@example.com")

    resp = client.post(
        "/users",
        json={"name": "Someone Else", "email": "taken@example.com", "password": "secret123"},
    )

    assert resp.status_code == 409
    assert resp.json()["detail"] == "Email already in use"
    assert len(client.get("/users").json()) == 1


def test_create_user_with_invalid_body_is_400(client):
    resp = client.post("/users", json={"name": "U", "email": "not-an-email", "password": "123"})

    assert resp.status_code == 400
    fields = {err["loc"][-1] for err in resp.json()["detail"]}
    assert fields == {"name", "email", "password"}


def test_create_user_missing_fields_is_400(client):
    resp = client.post("/users", json={"email": "a@example.com"})
    assert resp.status_code == 400


def test_list_users(client, make_user):
    assert client.get("/users").json() == []

    make_user()
    make_user()

    users = client.get("/users").json()
    assert len(users) == 2
    assert all("password" not in u for u in users)


def test_get_user(client, make_user):
    user = make_user()

    resp = client.get(f"/users/{user['id']}")

    assert resp.status_code == 200
    assert resp.json() == user


def test_get_unknown_user_is_404(client):
    resp = client.get(f"/users/{uuid.uuid4()}")
    assert resp.status_code == 404


def test_get_user_with_malformed_id_is_404(client):
    resp = client.get("/users/not-a-uuid")
    assert resp.status_code == 404
    assert "not-a-uuid" in resp.json()["detail"]


def test_update_user_keeps_unspecified_fields(client, make_user):
    user = make_user(name="Original Name", email="orig@example.com")

    resp = client.patch(f"/users/{user['id']}", json={"name": "New Name"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "New Name"
    assert body["email"] == "orig@example.com"
    assert "password" not in body
    assert client.get(f"/users/{user['id']}").json()["name"] == "New Name"


def test_update_user_password_is_accepted_but_not_returned(client, make_user):
    user = make_user()

    resp = client.patch(f"/users/{user['id']}", json={"password": "another-secret"})

    assert resp.status_code == 200
    assert "password" not in resp.json()


def test_update_user_to_taken_email_is_conflict(client, make_user):
    make_user(email="first@example.com")
    second = make_user(email="second@example.com")

    resp = client.patch(f"/users/{second['id']}", json={"email": "first@example.com"})

    assert resp.status_code == 409
    assert client.get(f"/users/{second['id']}").json()["email"] == "second@example.com"


def test_update_user_with_own_email_is_allowed(client, make_user):
    user = make_user(email="same@example.com")

    resp = client.patch(f"/users/{user['id']}", json={"email": "same@example.com"})

    assert resp.status_code == 200


def test_update_user_rejects_unknown_fields(client, make_user):
    user = make_user()

    resp = client.patch(f"/users/{user['id']}", json={"isAdmin": True})

    assert resp.status_code == 400


def test_update_unknown_user_is_404(client):
    assert client.patch(f"/users/{uuid.uuid4()}", json={"name": "Nobody"}).status_code == 404
    assert client.patch("/users/123", json={"name": "Nobody"}).status_code == 404


def test_delete_user(client, make_user):
    user = make_user()

    resp = client.delete(f"/users/{user['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"deleted": True, "id": user["id"]}
    assert client.get(f"/users/{user['id']}").status_code == 404


def test_delete_unknown_user_is_404(client):
    assert client.delete(f"/users/{uuid.uuid4()}").status_code == 404
    assert client.delete("/users/nope").status_code == 404


def test_non_canonical_id_forms_are_404(client, make_user):
    user = make_user()
    variants = [
        user["id"].replace("-", ""),
        f"urn:uuid:{user['id']}",
        f"{{{user['id']}}}",
    ]

    for variant in variants:
        assert client.get(f"/users/{variant}").status_code == 404
        assert client.patch(f"/users/{variant}", json={"name": "Renamed"}).status_code == 404
        assert client.delete(f"/users/{variant}").status_code == 404

    assert client.get(f"/users/{user['id']}").status_code == 200


def test_delete_user_echoes_canonical_id(client, make_user):
    user = make_user()

    resp = client.delete(f"/users/{user['id'].upper()}")

    assert resp.status_code == 200
    assert resp.json()["id"] == user["id"]
