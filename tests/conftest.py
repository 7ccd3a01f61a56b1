import pytest
from fastapi.testclient import TestClient

from docmanager.main import create_app
from docmanager.shared.config import Settings


def make_settings(**overrides) -> Settings:
    # in-memory SQLite + cheap bcrypt keeps every test isolated and fast
    values = {"DATABASE_URL": "sqlite://", "BCRYPT_ROUNDS": 4, "MOUNT_PATH": "", "LOG_LEVEL": "WARNING"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def app():
    return create_app(make_settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_client():
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides)))
    return _make


@pytest.fixture
def folder_id(client):
    r = client.post("/folders", json={"name": "Invoices"})
    return r.json()["folder"]["id"]


@pytest.fixture
def upload(client):
    def _upload(folder_id, content=b"hello", filename="hello.txt", mime="text/plain", **form):
        data = {"folder_id": str(folder_id), **form}
        return client.post("/documents", data=data, files={"file": (filename, content, mime)})
    return _upload
