from fastapi.testclient import TestClient

from chat_gateway.api.app import create_app
from chat_gateway.domain.models import CanonicalResponse


def test_chat_route_returns_canonical_body(monkeypatch):
    seen = {}

    def fake_handle_chat(payload):
        seen["payload"] = payload
        return CanonicalResponse.success("hello")

    monkeypatch.setattr("chat_gateway.api.app.handle_chat", fake_handle_chat)
    client = TestClient(create_app())
    body = {"provider": "openai", "messages": [], "contextMessage": "hi", "apiKey": "sk"}
    r = client.post("/api/ai", json=body)
    assert r.status_code == 200
    assert r.json() == {"content": "hello"}
    assert seen["payload"] == body


def test_chat_route_unsupported_provider_is_400():
    client = TestClient(create_app())
    r = client.post("/api/ai", json={"provider": "bard", "messages": [], "contextMessage": "hi"})
    assert r.status_code == 400
    assert r.json() == {"error": "Unsupported provider: bard"}


def test_chat_route_provider_failure_is_500(monkeypatch):
    client = TestClient(create_app())

    class Resp:
        status_code = 503
        reason_phrase = "Service Unavailable"
        text = "overloaded"

    class Client:
        def __init__(self, *a, **kw):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *a):
            return False

        def post(self, *a, **kw):
            return Resp()

    monkeypatch.setattr("httpx.Client", Client)
    r = client.post("/api/ai", json={"provider": "gemini", "messages": [], "contextMessage": "hi", "apiKey": "k"})
    assert r.status_code == 500
    assert r.json() == {"error": "Gemini API error: Service Unavailable - overloaded"}


def test_chat_route_rejects_non_object_body():
    client = TestClient(create_app())
    r = client.post("/api/ai", content=b"[1, 2]", headers={"Content-Type": "application/json"})
    assert r.status_code == 500
    assert set(r.json()) == {"error"}

    r = client.post("/api/ai", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 500
    assert set(r.json()) == {"error"}


def test_health_lists_providers():
    client = TestClient(create_app())
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert {"openai", "anthropic", "claude", "gemini", "ollama", "ollamaCloud"} == set(data["providers"])


def test_chat_route_deeply_nested_body_keeps_error_shape():
    client = TestClient(create_app(), raise_server_exceptions=False)
    r = client.post(
        "/api/ai",
        content=b"[" * 100000 + b"]" * 100000,
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 500
    assert set(r.json()) == {"error"}
    assert r.json()["error"]
