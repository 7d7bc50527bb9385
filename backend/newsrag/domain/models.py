# newsrag/domain/models.py

"""
Domain Models - Value Objects and Records

Value Objects: Immutable, defined by attributes (e.g., Passage, Article)
Records: Serialized into the key-value store (e.g., Turn)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ============================================================
# RECORDS (Round-trip through the store)
# ============================================================

@dataclass
class Turn:
    """
    One question/answer exchange in a session

    Unknown fields read from the store are kept in ``extra`` and
    written back unchanged.
    """
    query: str
    answer: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Turn":
        extra = {k: v for k, v in data.items() if k not in ("query", "answer")}
        return cls(
            query=data.get("query", ""),
            answer=data.get("answer", ""),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**self.extra, "query": self.query, "answer": self.answer}


# ============================================================
# VALUE OBJECTS (Immutable)
# ============================================================

@dataclass(frozen=True)
class Passage:
    """
    A retrieved article excerpt used as prompt context

    Extra payload fields coming from the index are ignored.
    """
    title: str
    content: str
    link: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Passage":
        return cls(
            title=payload.get("title") or "",
            content=payload.get("content") or "",
            link=payload.get("link"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"title": self.title, "content": self.content, "link": self.link}


@dataclass(frozen=True)
class Article:
    """
    A normalized news item produced by feed ingestion
    """
    id: str
    title: str
    content: str
    link: Optional[str] = None

    def to_passage(self) -> Passage:
        return Passage(title=self.title, content=self.content, link=self.link)


# ============================================================
# RESULT OBJECTS (Return Types)
# ============================================================

@dataclass(frozen=True)
class ChatTurnResult:
    """
    Result of one chat turn

    Holds the model answer and the session history after the append.
    """
    answer: str
    history: List[Turn]
    passages: List[Passage] = field(default_factory=list)

    def history_dicts(self) -> List[Dict[str, Any]]:
        return [turn.to_dict() for turn in self.history]


# ============================================================
# DOMAIN EXCEPTIONS
# ============================================================

class DomainException(Exception):
    """Base exception for domain layer"""
    pass


class InvalidRequest(DomainException):
    """Raised when input is missing or malformed (before any I/O)"""
    pass


class StoreUnavailable(DomainException):
    """Raised when the key-value store cannot be reached or fails"""
    pass


class CorruptSession(DomainException):
    """Raised when stored session history is not a JSON array of objects"""
    pass


class EmbeddingUnavailable(DomainException):
    """Raised when the embedding provider returns no usable vector"""
    pass


class GenerationFailure(DomainException):
    """Raised when the language model call fails"""
    pass


class RetrieverError(DomainException):
    """Raised when the vector index fails"""
    pass


class IngestionError(DomainException):
    """Raised when feed ingestion produces nothing to index"""
    pass
