from fastapi.testclient import TestClient

from app.main import create_app
from app.services.chat_flow import ChatFlowService
from app.services.summary_service import SummaryService


def _client(settings, gemini) -> TestClient:
    app = create_app()

    # Lazy import to avoid importing the real GeminiService
    import app.api.chat as chat_api

    app.dependency_overrides[chat_api.get_chat_flow_service] = lambda: ChatFlowService(
        gemini, settings=settings
    )
    app.dependency_overrides[chat_api.get_summary_service] = lambda: SummaryService(gemini)
    return TestClient(app)


def test_chat_happy_path(settings, fake_gemini):
    gemini = fake_gemini
    gemini.replies["response"] = "Hi! How can I help?"
    client = _client(settings, gemini)

    r = client.post(
        "/api/v1/chat",
        json={"message": "hello", "conversationHistory": "", "isGreeting": True},
    )
    assert r.status_code == 200
    assert r.json() == {"response": "Hi! How can I help?"}
    assert "The user opened with a greeting." in gemini.prompts[0]


def test_chat_schema_defaults(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    r = client.post("/api/v1/chat", json={"message": "hi"})
    assert r.status_code == 200
    assert r.json() == {"response": "response:ok"}


def test_client_greeting_hint_forces_greeting_branch(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    r = client.post("/api/v1/chat", json={"message": "yo", "isGreeting": True})
    assert r.status_code == 200
    assert "The user opened with a greeting." in fake_gemini.prompts[0]


def test_chat_passes_history_into_prompt(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    r = client.post(
        "/api/v1/chat",
        json={"message": "and then?", "conversationHistory": "\nUser: A\nAI: B"},
    )
    assert r.status_code == 200
    assert "Conversation History:\nUser: A\nAI: B" in fake_gemini.prompts[0]


def test_live_data_request_uses_search_tool(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    r = client.post("/api/v1/chat", json={"message": "latest news about space"})
    assert r.status_code == 200
    assert r.json() == {"response": "searched:True"}
    assert fake_gemini.prompts == []


def test_provider_failure_returns_error_body(settings, fake_gemini):
    gemini = fake_gemini
    gemini.error = RuntimeError("quota exceeded")
    client = _client(settings, gemini)

    r = client.post("/api/v1/chat", json={"message": "hi"})
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error: quota exceeded"}


def test_missing_message_is_validation_error(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    r = client.post("/api/v1/chat", json={"conversationHistory": ""})
    assert r.status_code == 422


def test_summarize_context(settings, fake_gemini):
    gemini = fake_gemini
    gemini.replies["summary"] = "They talked about TCP."
    client = _client(settings, gemini)

    r = client.post(
        "/api/v1/summarize-context",
        json={"conversationHistory": "\nUser: explain tcp\nAI: ..."},
    )
    assert r.status_code == 200
    assert r.json() == {"summary": "They talked about TCP."}
    assert "explain tcp" in gemini.prompts[0]


def test_missing_api_key_returns_error_body(monkeypatch):
    from app.core.settings import get_settings
    from app.dependencies import get_gemini_service

    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    get_settings.cache_clear()
    get_gemini_service.cache_clear()
    try:
        client = TestClient(create_app(), raise_server_exceptions=False)
        r = client.post("/api/v1/chat", json={"message": "hi"})
    finally:
        get_settings.cache_clear()
        get_gemini_service.cache_clear()

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "Internal server error: GEMINI_API_KEY is not configured"}


def test_error_schema_is_documented(settings, fake_gemini):
    client = _client(settings, fake_gemini)

    spec = client.get("/openapi.json").json()
    assert "ErrorResponse" in spec["components"]["schemas"]
    assert "500" in spec["paths"]["/api/v1/chat"]["post"]["responses"]
    assert "400" in spec["paths"]["/api/v1/analyze-file"]["post"]["responses"]
