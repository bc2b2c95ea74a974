from contactdesk.extensions import db
from contactdesk.models import Contact


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json["status"] == "ok"
    assert response.json["timestamp"]


def test_list_contacts_empty(client):
    response = client.get("/api/contacts")

    assert response.status_code == 200
    assert response.json == {"success": True, "data": []}


def test_create_contact(client, jane):
    response = client.post("/api/contacts", json=jane)

    assert response.status_code == 201
    assert response.json["success"] is True
    assert response.json["message"] == "Contact submitted successfully!"
    contact_id = response.json["id"]

    data = client.get("/api/contacts").json["data"]
    assert len(data) == 1
    assert data[0]["id"] == contact_id
    assert data[0]["name"] == "Jane Smith"
    assert data[0]["email"] == "jane@example.com"
    assert data[0]["phone"] is None
    assert data[0]["subject"] == "Support"
    assert data[0]["message"] == "Hello, this is a test message."
    assert data[0]["created_at"]


def test_create_contact_with_phone(client, jane):
    jane["phone"] = "  +44 20 7946 0000 "
    client.post("/api/contacts", json=jane)

    assert client.get("/api/contacts").json["data"][0]["phone"] == "+44 20 7946 0000"


def test_validation_failure_writes_nothing(client, jane):
    jane["message"] = "short"
    jane["email"] = "not-an-email"
    response = client.post("/api/contacts", json=jane)

    assert response.status_code == 400
    assert response.json["success"] is False
    assert [e["field"] for e in response.json["errors"]] == ["email", "message"]
    assert client.get("/api/contacts").json["data"] == []


def test_short_message_is_rejected(client, jane):
    jane["message"] = "short"
    response = client.post("/api/contacts", json=jane)

    assert response.status_code == 400
    assert response.json["errors"] == [
        {"field": "message", "message": "Message must be at least 10 characters"},
    ]


def test_non_json_body(client):
    response = client.post("/api/contacts", data="name=Jane", content_type="text/plain")

    assert response.status_code == 400
    assert [e["field"] for e in response.json["errors"]] == ["name", "email", "subject", "message"]


def test_malformed_json_body(client):
    response = client.post("/api/contacts", data="{not json", content_type="application/json")

    assert response.status_code == 400
    assert len(response.json["errors"]) == 4


def test_list_is_newest_first(client, jane):
    first = client.post("/api/contacts", json=jane).json["id"]
    jane["subject"] = "Follow-up"
    second = client.post("/api/contacts", json=jane).json["id"]

    data = client.get("/api/contacts").json["data"]
    assert [c["id"] for c in data] == [second, first]


def test_delete_contact(client, jane):
    contact_id = client.post("/api/contacts", json=jane).json["id"]

    response = client.delete(f"/api/contacts/{contact_id}")

    assert response.status_code == 200
    assert response.json == {"success": True, "message": "Contact deleted"}
    assert client.get("/api/contacts").json["data"] == []


def test_delete_missing_contact(client, jane):
    contact_id = client.post("/api/contacts", json=jane).json["id"]

    response = client.delete("/api/contacts/9999")

    assert response.status_code == 200
    assert response.json["success"] is True
    assert [c["id"] for c in client.get("/api/contacts").json["data"]] == [contact_id]


def test_store_failures_hide_driver_detail(client, jane):
    Contact.__table__.drop(bind=db.engine)

    response = client.get("/api/contacts")
    assert response.status_code == 500
    assert response.json == {"success": False, "error": "Failed to fetch contacts"}

    response = client.post("/api/contacts", json=jane)
    assert response.status_code == 500
    assert response.json == {"success": False, "error": "Failed to save contact"}

    response = client.delete("/api/contacts/1")
    assert response.status_code == 500
    assert response.json == {"success": False, "error": "Failed to delete contact"}


def test_unknown_route_is_json(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json["success"] is False


def test_wrong_method_is_json(client):
    response = client.put("/api/contacts")

    assert response.status_code == 405
    assert response.json["success"] is False


def test_cors_header(client):
    origin = "http://localhost:5173"
    response = client.get("/api/health", headers={"Origin": origin})

    # Flask-Cors echoes the caller origin unless send_wildcard is set
    assert response.headers["Access-Control-Allow-Origin"] in {"*", origin}


def test_delete_malformed_id(client, jane):
    contact_id = client.post("/api/contacts", json=jane).json["id"]

    for raw in ["abc", "-1", "1.5", str(2 ** 64)]:
        response = client.delete(f"/api/contacts/{raw}")

        assert response.status_code == 200
        assert response.json == {"success": True, "message": "Contact deleted"}

    assert [c["id"] for c in client.get("/api/contacts").json["data"]] == [contact_id]


def test_created_at_is_utc(client, jane):
    client.post("/api/contacts", json=jane)

    created_at = client.get("/api/contacts").json["data"][0]["created_at"]
    assert created_at.endswith("+00:00")
