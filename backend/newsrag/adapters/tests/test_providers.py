# backend/newsrag/adapters/tests/test_providers.py
"""
Tests for embedding and LLM provider adapters
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from newsrag.adapters.embeddings.fake import FakeEmbedding
from newsrag.adapters.embeddings.jina import JinaEmbedding
from newsrag.adapters.llm.fake import FakeLLM
from newsrag.adapters.llm.gemini import GeminiLLM
from newsrag.adapters.llm.openrouter import OpenRouterLLM
from newsrag.domain.models import EmbeddingUnavailable, GenerationFailure

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"


def _http_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class TestFakeEmbedding:

    def test_deterministic(self):
        provider = FakeEmbedding(dimension=16)
        assert provider.embed_query("text") == provider.embed_query("text")
        assert provider.embed_query("text") != provider.embed_query("other")
        assert provider.call_count == 4

    def test_fixed_vector(self):
        assert FakeEmbedding(vector=[0.5]).embed_query("x") == [0.5]


class TestJinaEmbedding:

    def setup_method(self):
        self.provider = JinaEmbedding(api_key="jina-key", dimension=3)

    def test_requires_api_key(self):
        with pytest.raises(ValueError):
            JinaEmbedding(api_key="")

    def test_embed_query(self):
        payload = {"data": [{"embedding": [0.1, 0.2, 0.3]}]}
        with patch.object(self.provider.session, "post", return_value=_http_response(payload=payload)) as post:
            vector = self.provider.embed_query("hello")

        assert vector == [0.1, 0.2, 0.3]
        kwargs = post.call_args.kwargs
        assert kwargs["json"] == {"model": "jina-embeddings-v2-base-en", "input": "hello"}
        assert kwargs["headers"]["Authorization"] == "Bearer jina-key"

    @pytest.mark.parametrize("payload", [{"data": []}, {"data": [{"embedding": []}]}, {}])
    def test_missing_embedding(self, payload):
        with patch.object(self.provider.session, "post", return_value=_http_response(payload=payload)):
            with pytest.raises(EmbeddingUnavailable):
                self.provider.embed_query("hello")

    def test_http_error(self):
        with patch.object(self.provider.session, "post", return_value=_http_response(status_code=401)):
            with pytest.raises(EmbeddingUnavailable):
                self.provider.embed_query("hello")

    def test_network_error(self):
        with patch.object(self.provider.session, "post", side_effect=requests.Timeout("timed out")):
            with pytest.raises(EmbeddingUnavailable, match="timed out"):
                self.provider.embed_query("hello")


class TestGeminiLLM:

    def setup_method(self):
        self.llm = GeminiLLM(api_url=GEMINI_URL, api_key="gemini-key")

    def test_model_from_url(self):
        assert self.llm.model == "gemini-2.0-flash"

    def test_requires_url_and_key(self):
        with pytest.raises(ValueError):
            GeminiLLM(api_url="", api_key="k")
        with pytest.raises(ValueError):
            GeminiLLM(api_url=GEMINI_URL, api_key="")

    def test_generate(self):
        payload = {"candidates": [{"content": {"parts": [{"text": "An answer."}]}}]}
        with patch.object(self.llm.session, "post", return_value=_http_response(payload=payload)) as post:
            answer = self.llm.generate("prompt text")

        assert answer == "An answer."
        kwargs = post.call_args.kwargs
        assert kwargs["json"] == {"contents": [{"role": "user", "parts": [{"text": "prompt text"}]}]}
        assert kwargs["headers"]["x-goog-api-key"] == "gemini-key"

    @pytest.mark.parametrize("payload", [{}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}])
    def test_missing_candidate_text(self, payload):
        with patch.object(self.llm.session, "post", return_value=_http_response(payload=payload)):
            assert self.llm.generate("prompt") is None

    def test_api_error_detail(self):
        payload = {"error": {"message": "API key not valid"}}
        with patch.object(self.llm.session, "post", return_value=_http_response(400, payload)):
            with pytest.raises(GenerationFailure, match="API key not valid"):
                self.llm.generate("prompt")

    def test_network_error(self):
        with patch.object(self.llm.session, "post", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(GenerationFailure):
                self.llm.generate("prompt")


class TestOpenRouterLLM:

    def setup_method(self):
        self.llm = OpenRouterLLM(api_key="or-key", model="test-model")
        self.llm.client = MagicMock()

    def test_generate_sends_single_user_message(self):
        message = MagicMock(content="An answer.")
        self.llm.client.chat.completions.create.return_value = MagicMock(
            choices=[MagicMock(message=message)],
            usage=MagicMock(prompt_tokens=10, completion_tokens=5, total_tokens=15),
        )

        assert self.llm.generate("prompt text") == "An answer."
        kwargs = self.llm.client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "prompt text"}]
        assert self.llm.get_last_usage()["total"] == 15

    def test_no_choices(self):
        self.llm.client.chat.completions.create.return_value = MagicMock(choices=[], usage=None)
        assert self.llm.generate("prompt") is None


class TestFakeLLM:

    def test_records_prompts(self):
        llm = FakeLLM(response="ok")
        assert llm.generate("p1") == "ok"
        assert llm.last_prompt == "p1"
        assert llm.generate_called

    def test_raises_configured_error(self):
        llm = FakeLLM(error=GenerationFailure("boom"))
        with pytest.raises(GenerationFailure):
            llm.generate("p")
