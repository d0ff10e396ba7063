from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.testclient import TestClient
import pytest

from kinship_py.web.app import app, service


@pytest.fixture
def client():
    service.cache.clear()
    return TestClient(app)


def test_openapi_schema_callable():
    schema = app.openapi()
    assert isinstance(schema, dict)
    assert "openapi" in schema
    assert "/api/resolve" in schema["paths"]


def test_docs_renderer_returns_html_response():
    resp = get_swagger_ui_html(openapi_url=app.openapi_url, title=f"{app.title} - Swagger UI")
    assert "html" in resp.media_type


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["cache"]["size"] == 0


def test_relations_lists_every_step(client):
    r = client.get("/api/relations", params={"lang": "en"})
    assert r.status_code == 200
    body = r.json()
    assert body["language"] == "en"
    assert body["relations"]["elder_sister"] == "Elder sister"
    assert len(body["relations"]) == 14


def test_resolve_post(client):
    payload = {"chain": ["mother", "younger_brother", "daughter"], "speakerGender": "male", "language": "en"}
    r = client.post("/api/resolve", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Maternal Cousin"
    assert body["description"] == "Mother's younger brother's daughter"
    assert body["relationPath"] == "mother>younger_brother>daughter"
    assert client.get("/api/health").json()["cache"]["size"] == 1


def test_resolve_post_defaults_to_self(client):
    r = client.post("/api/resolve", json={})
    assert r.status_code == 200
    assert r.json()["title"] == "自己"


def test_resolve_get_path(client):
    r = client.get("/api/resolve", params={"path": "father>elder_brother", "lang": "zh", "gender": "female"})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "伯父"
    assert body["colloquial"] == "伯伯"


def test_unknown_step_is_422(client):
    r = client.post("/api/resolve", json={"chain": ["father", "uncle"], "language": "en"})
    assert r.status_code == 422
    assert "uncle" in r.json()["detail"]
    assert client.get("/api/resolve", params={"path": "father>nope"}).status_code == 422


def test_invalid_language_is_422(client):
    r = client.post("/api/resolve", json={"chain": [], "language": "fr"})
    assert r.status_code == 422


def test_explain(client):
    r = client.post("/api/explain", json={"chain": ["son", "father"], "speakerGender": "female"})
    assert r.status_code == 200
    body = r.json()
    assert body["identity"]["category"] == "spouse"
    assert body["trace"] == ["childs_parent"]
