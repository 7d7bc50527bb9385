# backend/newsrag/domain/tests/test_models.py
"""
Tests for domain records and value objects
"""
from dataclasses import FrozenInstanceError

import pytest

from newsrag.domain.models import Article, ChatTurnResult, Passage, Turn


class TestTurn:

    def test_round_trip_keeps_unknown_fields(self):
        data = {"query": "hi", "answer": "hello", "ts": 1700000000}
        turn = Turn.from_dict(data)

        assert turn.query == "hi"
        assert turn.answer == "hello"
        assert turn.extra == {"ts": 1700000000}
        assert turn.to_dict() == data

    def test_missing_fields_default_to_empty(self):
        turn = Turn.from_dict({})
        assert turn.to_dict() == {"query": "", "answer": ""}


class TestPassage:

    def test_from_payload_ignores_extra_fields(self):
        passage = Passage.from_payload(
            {"title": "T", "content": "C", "link": None, "score": 0.9}
        )
        assert passage == Passage(title="T", content="C", link=None)
        assert passage.to_payload() == {"title": "T", "content": "C", "link": None}

    def test_passage_is_immutable(self):
        passage = Passage(title="T", content="C")
        with pytest.raises(FrozenInstanceError):
            passage.title = "other"


class TestArticle:

    def test_to_passage(self):
        article = Article(id="1", title="T", content="C", link="https://x")
        assert article.to_passage() == Passage(title="T", content="C", link="https://x")


class TestChatTurnResult:

    def test_history_dicts(self):
        result = ChatTurnResult(
            answer="hello", history=[Turn(query="hi", answer="hello")]
        )
        assert result.history_dicts() == [{"query": "hi", "answer": "hello"}]
        assert result.passages == []
