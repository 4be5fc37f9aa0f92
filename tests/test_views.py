import pytest

from santapair import create_app
from santapair.services.participants import SqlParticipantStore, current_store


def names_in_store(app):
    with app.app_context():
        return [p.name for p in SqlParticipantStore().list_participants()]


def test_landing_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/index").status_code == 200
    assert client.get("/health").get_json() == {"status": "healthy"}


def test_add_people(app, client):
    resp = client.post("/addpeople", data={"name": "Alice"})
    assert resp.status_code == 200
    assert b"Alice" in resp.data
    assert names_in_store(app) == ["Alice"]

    resp = client.get("/addpeople")
    assert b"Alice" in resp.data


def test_add_blank_name_flashes_error(app, client):
    resp = client.post("/addpeople", data={"name": "  "})
    assert resp.status_code == 200
    assert b"Name is required." in resp.data
    assert names_in_store(app) == []


def test_delete_people(app, client):
    client.post("/addpeople", data={"name": "Alice"})
    client.post("/addpeople", data={"name": "Bob"})
    with app.app_context():
        alice_id = SqlParticipantStore().list_participants()[0].id

    resp = client.post("/deletepeople", data={"id": alice_id})
    assert resp.status_code == 200
    assert names_in_store(app) == ["Bob"]


@pytest.mark.parametrize("data", [{}, {"id": "abc"}])
def test_delete_without_id_is_ignored(app, client, data):
    client.post("/addpeople", data={"name": "Alice"})
    resp = client.post("/deletepeople", data=data)
    assert resp.status_code == 200
    assert names_in_store(app) == ["Alice"]


def test_delete_unknown_id_flashes_error(client):
    resp = client.post("/deletepeople", data={"id": 999})
    assert resp.status_code == 200
    assert b"Participant 999 not found" in resp.data


def test_generate_empty(client):
    resp = client.get("/generate")
    assert resp.status_code == 200
    assert b"Add some people first." in resp.data


def test_generate_single_participant(client):
    client.post("/addpeople", data={"name": "Alice"})
    resp = client.get("/generate")
    assert b"Nobody" in resp.data


def test_generate_pair(client):
    client.post("/addpeople", data={"name": "Alice"})
    client.post("/addpeople", data={"name": "Bob"})
    resp = client.get("/generate")
    assert resp.status_code == 200
    assert b"Nobody" not in resp.data
    assert resp.data.count(b"<td>Alice</td>") == 2
    assert resp.data.count(b"<td>Bob</td>") == 2


def test_seeded_draws_repeat(client):
    client.application.config["SANTAPAIR_RNG_SEED"] = 3
    for name in ("A", "B", "C", "D", "E"):
        client.post("/addpeople", data={"name": name})
    assert client.get("/generate").data == client.get("/generate").data


def test_custom_store(memory_store):
    memory_store.add_participant("Alice")
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "WTF_CSRF_ENABLED": False,
        "PARTICIPANT_STORE": memory_store,
    })
    with app.app_context():
        assert current_store() is memory_store

    client = app.test_client()
    client.post("/addpeople", data={"name": "Bob"})
    assert [p.name for p in memory_store.list_participants()] == ["Alice", "Bob"]
