"""
tests/test_api.py — HTTP tests against the FastAPI app.

Runs the real app (lifespan included) through TestClient; the LLM path is
disabled by default, so no network access is needed.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app
from app.responder.answers import CANNED_ANSWERS


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] in ("ok", "degraded")
        assert body["profile_source"] in ("file", "default")
        assert body["llm_enabled"] is False
        assert body["llm_reachable"] is None

    def test_profile(self, client):
        response = client.get("/profile")
        assert response.status_code == 200
        assert response.json()["name"]


class TestChat:

    def test_template_question(self, client, session_id):
        response = client.post("/chat", json={
            "question": "Can you walk me through your resume?",
            "session_id": session_id,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["answer"] == CANNED_ANSWERS["resume_overview"]
        assert body["rule"] == "template"
        assert body["pattern"] == "resume_overview"
        assert body["cached"] is False
        assert body["session_id"] == session_id

    def test_repeat_question_is_cached(self, client, session_id):
        payload = {"question": "What are your skills in AI?", "session_id": session_id}
        first = client.post("/chat", json=payload).json()
        second = client.post("/chat", json=payload).json()
        assert second["cached"] is True
        assert second["answer"] == first["answer"]

    def test_blank_question_gets_friendly_reply(self, client, session_id):
        body = client.post("/chat", json={"question": "  ", "session_id": session_id}).json()
        assert body["rule"] == "guardrail"
        assert body["answer"]

    def test_missing_session_id_rejected(self, client):
        response = client.post("/chat", json={"question": "hi", "session_id": ""})
        assert response.status_code == 422

    def test_oversized_question_gets_friendly_reply(self, client, session_id):
        response = client.post("/chat", json={"question": "x" * 2001, "session_id": session_id})
        assert response.status_code == 200
        body = response.json()
        assert body["rule"] == "guardrail"
        assert "2000" in body["answer"]

    def test_question_limit_follows_settings(self, client, session_id):
        with patch("app.llm.guardrails.get_settings", return_value=Settings(max_question_chars=10)):
            body = client.post("/chat", json={
                "question": "a question well over ten characters",
                "session_id": session_id,
            }).json()
        assert body["rule"] == "guardrail"
        assert "10 characters" in body["answer"]


class TestSessions:

    def test_history_after_chat(self, client, session_id):
        client.post("/chat", json={"question": "Hello!", "session_id": session_id})
        response = client.get(f"/sessions/{session_id}/history")
        assert response.status_code == 200
        messages = response.json()["messages"]
        assert [m["role"] for m in messages] == ["user", "assistant"]

    def test_history_unknown_session(self, client):
        assert client.get("/sessions/nobody-here/history").status_code == 404

    def test_delete_clears_session(self, client, session_id):
        client.post("/chat", json={"question": "Hello!", "session_id": session_id})
        assert client.delete(f"/sessions/{session_id}").status_code == 200

        history = client.get(f"/sessions/{session_id}/history").json()
        assert history["messages"] == []

    def test_delete_unknown_session(self, client):
        assert client.delete("/sessions/nobody-here").status_code == 404
