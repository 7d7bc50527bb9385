# backend/conftest.py

"""
Pytest configuration and fixtures.
"""
import pytest

from newsrag.adapters.embeddings.fake import FakeEmbedding
from newsrag.adapters.llm.fake import FakeLLM
from newsrag.adapters.retrieval.fake import FakeVectorIndex
from newsrag.adapters.store.inmemory_store import InMemoryKeyValueStore
from newsrag.domain.models import Article
from newsrag.infrastructure.config import build_test_config
from newsrag.infrastructure.container import build_services

PASSAGES = [
    {"title": "Ceasefire talks resume", "content": "Negotiators met in Doha.", "link": "https://example.com/1"},
    {"title": "Floods in Valencia", "content": "Heavy rain caused flooding.", "link": "https://example.com/2"},
    {"title": "Election results", "content": "The incumbent conceded.", "link": None},
]


class ManualClock:
    """Clock that only moves when told to"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StaticFeedReader:
    """Feed reader returning a fixed list of articles"""

    def __init__(self, articles=None):
        self.articles = articles or []
        self.limits = []

    def fetch_articles(self, limit: int = 100):
        self.limits.append(limit)
        return self.articles[:limit]


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def embedder():
    return FakeEmbedding(dimension=8)


@pytest.fixture
def llm():
    return FakeLLM(response="Talks resumed in Doha.")


@pytest.fixture
def index():
    return FakeVectorIndex(results=list(PASSAGES))


@pytest.fixture
def feed_reader():
    return StaticFeedReader(
        [
            Article(id="6f1c1f4e-9a43-4c1e-8d7b-0c1f00000001", title="A", content="Alpha news", link="https://a"),
            Article(id="6f1c1f4e-9a43-4c1e-8d7b-0c1f00000002", title="B", content="Beta news", link=None),
        ]
    )


@pytest.fixture
def services(store, index, embedder, llm, feed_reader):
    """Fully wired services over in-memory fakes"""
    return build_services(
        build_test_config(),
        store=store,
        index=index,
        embedder=embedder,
        llm=llm,
        feed_reader=feed_reader,
    )


@pytest.fixture
def api_services(services, monkeypatch):
    """Route the HTTP layer to the fake-backed services"""
    for module in ("newsrag.core.views", "newsrag.chat.views", "newsrag.rag.views"):
        monkeypatch.setattr(f"{module}.get_services", lambda: services)
    return services
