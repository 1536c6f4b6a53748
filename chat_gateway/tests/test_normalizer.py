import pytest

from chat_gateway.domain.exceptions import UnsupportedProviderError
from chat_gateway.domain.models import ChatMessage, ProviderId
from chat_gateway.domain.normalizer import MAX_HISTORY_MESSAGES, coerce_role, normalize, truncate_history


def _history(n):
    return [{"role": "user" if i % 2 == 0 else "assistant", "content": f"m{i}"} for i in range(n)]


def test_normalize_keeps_last_ten_and_appends_context():
    req = normalize({"provider": "openai", "messages": _history(15), "contextMessage": "now", "apiKey": "sk"})
    assert len(req.messages) == MAX_HISTORY_MESSAGES + 1
    assert [m.content for m in req.messages[:-1]] == [f"m{i}" for i in range(5, 15)]
    assert req.messages[-1] == ChatMessage(role="user", content="now")
    assert req.provider is ProviderId.OPENAI


def test_normalize_short_history_kept_in_order():
    req = normalize({"provider": "gemini", "messages": _history(3), "contextMessage": "ctx"})
    assert [m.content for m in req.messages] == ["m0", "m1", "m2", "ctx"]


def test_normalize_missing_messages_is_empty_history():
    req = normalize({"provider": "ollama", "contextMessage": "hi"})
    assert req.messages == (ChatMessage(role="user", content="hi"),)


def test_normalize_maps_ollama_fields_to_credentials():
    req = normalize({
        "provider": "ollamaCloud",
        "messages": [],
        "contextMessage": "x",
        "apiKey": "secret",
        "ollamaUrl": "https://ollama.example",
        "ollamaModel": "qwen3:8b",
    })
    assert req.credentials.api_key == "secret"
    assert req.credentials.base_url == "https://ollama.example"
    assert req.credentials.model_override == "qwen3:8b"
    assert "secret" not in repr(req.credentials)


def test_normalize_unknown_provider():
    with pytest.raises(UnsupportedProviderError) as exc:
        normalize({"provider": "OpenAI", "messages": [], "contextMessage": "x"})
    assert exc.value.http_status == 400
    assert "OpenAI" in exc.value.message


def test_normalize_malformed_message_entry_raises():
    with pytest.raises(AttributeError):
        normalize({"provider": "openai", "messages": ["oops"], "contextMessage": "x"})


def test_truncate_history_exactly_ten():
    msgs = [ChatMessage(role="user", content=str(i)) for i in range(10)]
    out = truncate_history(msgs, "c")
    assert len(out) == 11
    assert out[0].content == "0"


def test_coerce_role():
    assert coerce_role("assistant") == "assistant"
    assert coerce_role("user") == "user"
    assert coerce_role("system") == "user"
    assert coerce_role(None) == "user"
