"""FastAPI dependency providers.

Collaborators are created once per process from ``settings`` and handed to
the services explicitly; tests swap them via ``app.dependency_overrides``.
"""

from langchain_core.language_models import BaseChatModel

from interview_prep.core.config import Settings, settings
from interview_prep.services.document_store import (
    DocumentStore,
    InMemoryDocumentStore,
    RedisDocumentStore,
)
from interview_prep.services.embedding_service import EmbeddingGenerator
from interview_prep.services.feedback import FeedbackStrategy, KeywordFeedbackStrategy
from interview_prep.services.llm_service import get_chat_model

_document_store: DocumentStore | None = None
_embedding_generator: EmbeddingGenerator | None = None
_chat_model: BaseChatModel | None = None
_feedback_strategy: FeedbackStrategy | None = None


def get_settings() -> Settings:
    return settings


def get_document_store() -> DocumentStore:
    global _document_store
    if _document_store is None:
        if settings.document_store == "redis":
            _document_store = RedisDocumentStore.from_url(
                settings.redis_url, ttl=settings.document_ttl
            )
        else:
            _document_store = InMemoryDocumentStore()
    return _document_store


def get_embedding_generator() -> EmbeddingGenerator:
    global _embedding_generator
    if _embedding_generator is None:
        _embedding_generator = EmbeddingGenerator(settings)
    return _embedding_generator


def get_llm() -> BaseChatModel | None:
    global _chat_model
    if _chat_model is None:
        _chat_model = get_chat_model(settings)
    return _chat_model


def get_feedback_strategy() -> FeedbackStrategy:
    global _feedback_strategy
    if _feedback_strategy is None:
        _feedback_strategy = KeywordFeedbackStrategy()
    return _feedback_strategy
