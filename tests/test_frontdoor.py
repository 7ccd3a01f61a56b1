import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from docmanager.shared.frontdoor import normalize_path


@pytest.mark.parametrize(
    "path,mount,expected",
    [
        ("/folders/", "", "/folders"),
        ("/folders//", "", "/folders"),
        ("/", "", "/"),
        ("/api/folders", "/api", "/folders"),
        ("/api/folders/", "/api/", "/folders"),
        ("/api", "/api", "/"),
        ("/apix/folders", "/api", "/apix/folders"),
    ],
)
def test_normalize_path(path, mount, expected):
    assert normalize_path(path, mount) == expected


def test_trailing_slash_is_ignored(client):
    assert client.post("/folders/", json={"name": "Slash"}).status_code == 201
    r = client.get("/folders/")
    assert r.status_code == 200
    assert [f["name"] for f in r.json()] == ["Slash"]


def test_mount_path_is_stripped(make_client):
    c = make_client(MOUNT_PATH="/api")
    assert c.post("/api/folders", json={"name": "Mounted"}).status_code == 201
    assert c.get("/api/folders/").json()[0]["name"] == "Mounted"


def test_unknown_route(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Route not found"}


def test_unmatched_method_is_not_found(client):
    r = client.put("/folders")
    assert r.status_code == 404
    assert r.json() == {"error": "Route not found"}


def test_options_preflight(client):
    r = client.options(
        "/folders",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 204
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in r.headers["access-control-allow-methods"]
    assert client.options("/anything/at/all").status_code == 204


def test_cors_header_on_regular_requests(client):
    r = client.get("/folders", headers={"Origin": "https://example.com"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_database_unreachable_at_startup(make_client, tmp_path):
    c = make_client(DATABASE_URL=f"sqlite:///{(tmp_path / 'missing' / 'dir' / 'db.sqlite').as_posix()}")
    r = c.get("/folders")
    assert r.status_code == 500
    assert r.json() == {"error": "Database connection failed"}
    assert c.post("/register", json={"name": "a", "email": "a@b.c", "password": "p"}).status_code == 500
    # liveness does not touch the database
    assert c.get("/healthz").status_code == 200


def test_query_failure_hides_database_text(client, app, folder_id):
    with app.state.db.engine.begin() as conn:
        conn.execute(text("DROP TABLE documents"))
    r = client.get(f"/folders/{folder_id}/documents")
    assert r.status_code == 500
    assert r.json() == {"error": "Database error"}


def test_database_available_after_late_start(make_client, tmp_path):
    db_dir = tmp_path / "late"
    c = make_client(DATABASE_URL=f"sqlite:///{(db_dir / 'db.sqlite').as_posix()}")
    assert c.get("/folders").status_code == 500

    db_dir.mkdir()
    r = c.get("/folders")
    assert r.status_code == 200
    assert r.json() == []
    assert c.post("/folders", json={"name": "Recovered"}).status_code == 201


def test_unexpected_error_keeps_json_envelope(app, monkeypatch):
    def boom(db):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("docmanager.folders.api.list_folders", boom)
    c = TestClient(app, raise_server_exceptions=False)
    r = c.get("/folders")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal error"}


def test_shutdown_disposes_engine(app, monkeypatch):
    calls = []
    monkeypatch.setattr(app.state.db, "dispose", lambda: calls.append(True))
    with TestClient(app) as c:
        assert c.get("/healthz").status_code == 200
    assert calls == [True]


@pytest.mark.parametrize("big", ["99999999999999999999", str(2**63)])
def test_out_of_range_path_ids_are_not_found(client, big):
    assert client.delete(f"/folders/{big}").json() == {"error": "Folder not found"}
    r = client.get(f"/folders/{big}/documents")
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}
    r = client.get(f"/documents/{big}")
    assert r.status_code == 404
    assert r.json() == {"error": "Document not found"}


@pytest.mark.parametrize("big", ["99999999999999999999", str(2**63)])
def test_out_of_range_form_ids_are_rejected(client, folder_id, big):
    files = {"file": ("a.txt", b"a", "text/plain")}
    r = client.post("/documents", data={"folder_id": big}, files=files)
    assert r.status_code == 400
    assert r.json() == {"error": "folder_id is required and must be numeric"}
    r = client.post("/documents", data={"folder_id": str(folder_id), "uploaded_by": big}, files=files)
    assert r.status_code == 400
    r = client.post("/folders", json={"name": "Big", "created_by": int(big)})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


def test_largest_id_is_still_a_plain_miss(client):
    assert client.get(f"/documents/{2**63 - 1}").status_code == 404
    assert client.post("/folders", json={"name": "Max", "created_by": 2**63 - 1}).status_code == 201
