# backend/newsrag/infrastructure/tests/test_container.py
"""
Tests for configuration and the dependency injection container
"""
from unittest.mock import patch

import pytest

from newsrag.adapters.embeddings.fake import FakeEmbedding
from newsrag.adapters.llm.fake import FakeLLM
from newsrag.adapters.retrieval.numpy_index import NumPyVectorIndex
from newsrag.adapters.store.inmemory_store import InMemoryKeyValueStore
from newsrag.adapters.store.redis_store import RedisKeyValueStore
from newsrag.domain.models import DomainException
from newsrag.infrastructure import config as config_module
from newsrag.infrastructure.config import build_development_config, build_test_config, get_config
from newsrag.infrastructure.container import (
    build_services,
    create_embedding_provider,
    create_kv_store,
    create_llm_provider,
    create_vector_index,
    get_service_info,
    get_services,
    validate_config,
)


class TestConfig:

    def test_test_environment_selected(self):
        config = get_config()

        assert config["environment"] == "test"
        assert config["store"]["type"] == "memory"
        assert config["llm"]["type"] == "fake"

    def test_default_ttls(self):
        config = build_test_config()

        assert config["session"]["ttl"] == 1800
        assert config["cache"] == {"embedding_ttl": 86400, "retrieval_ttl": 300}
        assert config["retrieval"]["top_k"] == 5

    def test_development_reads_environment(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
        monkeypatch.setenv("COLLECTION_NAME", "world_news")
        monkeypatch.setenv("EMBEDDING_SIZE", "1024")

        config = build_development_config()

        assert config["store"] == {"type": "redis", "url": "redis://cache:6379/1"}
        assert config["retriever"]["collection"] == "world_news"
        assert config["embedding"]["dimension"] == 1024

    def test_configs_are_fresh_copies(self):
        first = build_test_config()
        first["session"]["ttl"] = 1

        assert build_test_config()["session"]["ttl"] == 1800

    def test_unknown_environment_falls_back_to_development(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")

        config = get_config()

        assert config["environment"] == "staging"
        assert config["store"]["type"] == config_module.build_development_config()["store"]["type"]


class TestAdapterFactories:

    def test_create_kv_store(self):
        assert isinstance(create_kv_store({"type": "memory"}), InMemoryKeyValueStore)
        with patch("newsrag.adapters.store.redis_store.redis.Redis.from_url"):
            assert isinstance(
                create_kv_store({"type": "redis", "url": "redis://localhost:6379/0"}),
                RedisKeyValueStore,
            )

    def test_create_embedding_provider(self):
        provider = create_embedding_provider({"type": "fake", "dimension": 8})
        assert isinstance(provider, FakeEmbedding)
        assert provider.dimension() == 8

    def test_create_llm_provider(self):
        llm = create_llm_provider({"type": "fake", "response": "hi"})
        assert isinstance(llm, FakeLLM)
        assert llm.generate("p") == "hi"

    def test_create_vector_index(self):
        assert isinstance(create_vector_index({"type": "memory"}), NumPyVectorIndex)

    @pytest.mark.parametrize(
        "factory",
        [create_kv_store, create_embedding_provider, create_llm_provider, create_vector_index],
    )
    def test_unknown_type(self, factory):
        with pytest.raises(ValueError):
            factory({"type": "nope"})


class TestBuildServices:

    def test_build_from_test_config(self):
        services = build_services(build_test_config())

        assert isinstance(services.store, InMemoryKeyValueStore)
        session_id = services.chat_service.create_session()
        result = services.chat_service.handle_chat_turn(session_id, "hello")
        assert result.answer == "Test response from fake LLM"

    def test_shared_store_between_sessions_and_cache(self, services, index):
        session_id = services.chat_service.create_session()
        services.chat_service.handle_chat_turn(session_id, "question")

        keys = services.store.keys("*")
        assert session_id in keys
        assert any(k.startswith("embed:") for k in keys)
        assert any(k.startswith("retrieve:") for k in keys)
        assert services.index is index

    def test_invalid_config_wrapped(self):
        config = build_test_config()
        config["store"] = {"type": "redis"}

        with pytest.raises(DomainException, match="Redis store requires 'url'"):
            build_services(config)

    def test_unknown_adapter_wrapped(self):
        config = build_test_config()
        config["llm"] = {"type": "nope"}

        with pytest.raises(DomainException):
            build_services(config)

    def test_get_services_is_cached(self):
        get_services.cache_clear()
        try:
            assert get_services() is get_services()
        finally:
            get_services.cache_clear()


class TestValidation:

    def test_valid(self):
        assert validate_config(build_test_config()) is True

    def test_missing_section(self):
        config = build_test_config()
        del config["cache"]

        with pytest.raises(ValueError, match="cache"):
            validate_config(config)

    def test_non_positive_top_k(self):
        config = build_test_config()
        config["retrieval"]["top_k"] = 0

        with pytest.raises(ValueError):
            validate_config(config)

    def test_service_info(self):
        info = get_service_info(build_test_config())

        assert info["store"] == {"type": "memory"}
        assert info["session_ttl"] == 1800
        assert info["prompt_version"] == "v1.0"
