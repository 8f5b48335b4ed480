from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient

from student_api.api.deps import get_student_repository
from student_api.core.config import settings
from student_api.main import app


def _create(client, name="Ada", email="ada@x.com"):
    r = client.post("/students", json={"name": name, "email": email})
    assert r.status_code == 200
    return r.json()


def test_root_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"


def test_list_empty(client):
    r = client.get("/students")
    assert r.status_code == 200
    assert r.json() == []


def test_create_assigns_id(client):
    body = _create(client)
    assert body["id"] == 1
    assert body["name"] == "Ada"
    assert body["email"] == "ada@x.com"


def test_create_ignores_client_id(client):
    _create(client)
    r = client.post("/students", json={"id": 1, "name": "Grace", "email": "grace@x.com"})
    assert r.status_code == 200
    assert r.json()["id"] == 2
    assert client.get("/students/1").json()["name"] == "Ada"


def test_get_returns_created_student(client):
    created = _create(client)
    r = client.get(f"/students/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_get_missing_returns_null(client):
    r = client.get("/students/42")
    assert r.status_code == 200
    assert r.json() is None


def test_update_partial_keeps_other_fields(client):
    created = _create(client)
    r = client.put(f"/students/{created['id']}", json={"name": "Ada L."})
    assert r.status_code == 200
    assert r.json() == {"id": created["id"], "name": "Ada L.", "email": "ada@x.com"}


def test_update_ignores_id_in_body(client):
    created = _create(client)
    r = client.put(f"/students/{created['id']}", json={"id": 99, "name": "Ada L."})
    assert r.json()["id"] == created["id"]
    assert client.get("/students/99").json() is None


def test_update_both_fields_then_get(client):
    created = _create(client)
    client.put(f"/students/{created['id']}", json={"name": "A", "email": "b@x.com"})
    r = client.get(f"/students/{created['id']}")
    assert r.json() == {"id": created["id"], "name": "A", "email": "b@x.com"}


def test_update_missing_returns_null_and_persists_nothing(client):
    r = client.put("/students/7", json={"name": "Ghost", "email": "ghost@x.com"})
    assert r.status_code == 200
    assert r.json() is None
    assert client.get("/students").json() == []


def test_delete_then_get_is_null(client):
    created = _create(client)
    r = client.delete(f"/students/{created['id']}")
    assert r.status_code == 200
    assert r.content == b""
    assert client.get(f"/students/{created['id']}").json() is None


def test_delete_missing_is_success(client):
    r = client.delete("/students/99")
    assert r.status_code == 200
    assert r.content == b""


def test_list_returns_each_live_record_once(client):
    a = _create(client, "Ada", "ada@x.com")
    b = _create(client, "Grace", "grace@x.com")
    c = _create(client, "Linus", "linus@x.com")
    client.delete(f"/students/{b['id']}")

    ids = [s["id"] for s in client.get("/students").json()]
    assert ids == [a["id"], c["id"]]


def test_list_search_matches_name_or_email(client):
    _create(client, "Ada Lovelace", "ada@x.com")
    _create(client, "Grace Hopper", "grace@navy.mil")

    names = [s["name"] for s in client.get("/students", params={"search": "LOVE"}).json()]
    assert names == ["Ada Lovelace"]
    names = [s["name"] for s in client.get("/students", params={"search": "navy"}).json()]
    assert names == ["Grace Hopper"]


def test_invalid_id_uses_error_envelope(client):
    r = client.get("/students/abc")
    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "path.student_id" in body["error"]["details"]


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/teachers")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_ERROR"


def test_strict_not_found_setting_answers_404(client, monkeypatch):
    monkeypatch.setattr(settings, "STRICT_NOT_FOUND", True)

    r = client.get("/students/5")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"
    assert r.json()["error"]["details"] == {"student_id": 5}

    r = client.put("/students/5", json={"name": "x"})
    assert r.status_code == 404
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "NOT_FOUND"
    assert client.get("/students").json() == []


def test_store_failure_is_500(client):
    class BrokenStore:
        def find_all(self, search=None):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    app.dependency_overrides[get_student_repository] = lambda: BrokenStore()
    r = TestClient(app, raise_server_exceptions=False).get("/students")
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_cors_allows_frontend_origin(client):
    r = client.options(
        "/students",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_list_search_treats_wildcards_literally(client):
    _create(client, "Ada", "ada@x.com")
    _create(client, "snake_case", "snake@x.com")

    names = [s["name"] for s in client.get("/students", params={"search": "_"}).json()]
    assert names == ["snake_case"]
    assert client.get("/students", params={"search": "%"}).json() == []
