# backend/newsrag/chat/tests/test_views.py
"""
Tests for session and chat endpoints
"""
from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from newsrag.domain.models import StoreUnavailable
from newsrag.domain.services.cache import retrieval_key


class TestSessionEndpoints:
    """Test session create/history/clear/keys"""

    @pytest.fixture(autouse=True)
    def _setup(self, api_services):
        self.client = APIClient()
        self.services = api_services

    def _create(self):
        response = self.client.post(reverse("chat:session-create"))
        assert response.status_code == 201
        return response.json()["sessionId"]

    def test_create_session(self):
        session_id = self._create()

        response = self.client.get(reverse("chat:session-history", kwargs={"session_id": session_id}))

        assert response.status_code == 200
        assert response.json() == {"sessionId": session_id, "history": []}

    def test_history_not_found(self):
        response = self.client.get(reverse("chat:session-history", kwargs={"session_id": "missing-id"}))

        assert response.status_code == 404
        assert response.json() == {"error": "session not found"}

    def test_clear_session(self):
        session_id = self._create()
        self.services.chat_service.handle_chat_turn(session_id, "question")

        response = self.client.delete(reverse("chat:session-clear", kwargs={"session_id": session_id}))

        assert response.status_code == 200
        assert response.json() == {"sessionId": session_id, "history": []}
        assert self.services.chat_service.get_history(session_id) == []

    def test_reserved_session_id_rejected(self):
        response = self.client.get(reverse("chat:session-history", kwargs={"session_id": "embed:abc"}))

        assert response.status_code == 400

    def test_session_keys(self):
        session_id = self._create()
        self.services.chat_service.handle_chat_turn(session_id, "question")

        response = self.client.get(reverse("chat:session-keys"))

        assert response.status_code == 200
        assert response.json() == {"keys": [session_id]}

    def test_store_failure_is_500(self):
        with patch.object(self.services.store, "get", side_effect=StoreUnavailable("down")):
            response = self.client.get(
                reverse("chat:session-history", kwargs={"session_id": "any-session"})
            )

        assert response.status_code == 500
        assert response.json()["error"] == "failed to load session"


class TestChatEndpoint:
    """Test POST /api/sessions/{id}/chat/"""

    @pytest.fixture(autouse=True)
    def _setup(self, api_services, llm, index):
        self.client = APIClient()
        self.services = api_services
        self.llm = llm
        self.index = index
        self.session_id = self.services.chat_service.create_session()
        self.url = reverse("chat:chat", kwargs={"session_id": self.session_id})

    def test_chat_turn(self):
        response = self.client.post(self.url, {"query": "What happened in Doha?", "topK": 2}, format="json")

        assert response.status_code == 200
        data = response.json()
        assert data["sessionId"] == self.session_id
        assert data["answer"] == "Talks resumed in Doha."
        assert data["history"] == [{"query": "What happened in Doha?", "answer": "Talks resumed in Doha."}]
        assert self.index.searches[0]["limit"] == 2

    def test_default_top_k(self):
        self.client.post(self.url, {"query": "What happened?"}, format="json")

        assert self.index.searches[0]["limit"] == 5

    def test_history_accumulates(self):
        self.client.post(self.url, {"query": "first"}, format="json")
        response = self.client.post(self.url, {"query": "second"}, format="json")

        assert [t["query"] for t in response.json()["history"]] == ["first", "second"]
        assert "Q1: first" in self.llm.last_prompt

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"query": ""},
            {"query": "   "},
            {"query": 123},
            {"query": 1.5},
            {"query": ["x"]},
            {"query": None},
            {"query": "q", "topK": 0},
        ],
    )
    def test_invalid_request(self, body):
        response = self.client.post(self.url, body, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "query missing"
        assert not self.llm.generate_called
        assert self.services.chat_service.get_history(self.session_id) == []

    def test_query_is_stored_as_sent(self):
        response = self.client.post(self.url, {"query": "  hi  "}, format="json")

        assert response.status_code == 200
        assert response.json()["history"] == [{"query": "  hi  ", "answer": "Talks resumed in Doha."}]
        assert self.llm.last_prompt.endswith("User:   hi  ")
        assert retrieval_key("  hi  ", 5) in self.services.store.keys("retrieve:*")

    def test_generation_failure(self):
        self.llm.error = RuntimeError("quota exceeded")

        response = self.client.post(self.url, {"query": "question"}, format="json")

        assert response.status_code == 500
        assert response.json()["error"] == "chat failed"
        assert self.services.chat_service.get_history(self.session_id) == []

    def test_empty_generation(self):
        self.llm.response = None

        response = self.client.post(self.url, {"query": "question"}, format="json")

        assert response.status_code == 500
        assert self.services.chat_service.get_history(self.session_id) == []
