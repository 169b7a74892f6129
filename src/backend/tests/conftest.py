"""Shared fixtures: settings without an API key, stub models, document builders."""

import asyncio
import math
from datetime import datetime, timedelta, timezone

import pytest

from interview_prep.core.config import Settings
from interview_prep.models.schemas import Chunk, Document, DocumentType
from interview_prep.services.document_store import InMemoryDocumentStore
from interview_prep.services.embedding_service import EmbeddingGenerator


class StubEmbeddings:
    """Stands in for a LangChain embeddings client."""

    def __init__(self, vector=None, exc=None, delay=0.0):
        self.vector = vector
        self.exc = exc
        self.delay = delay
        self.calls: list[str] = []

    async def aembed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.exc is not None:
            raise self.exc
        return self.vector


def unit_vector(similarity: float) -> list[float]:
    """2-d unit vector whose cosine with [1, 0] is ``similarity``."""
    return [similarity, math.sqrt(1 - similarity ** 2)]


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="", document_store="memory")


@pytest.fixture
def generator(settings) -> EmbeddingGenerator:
    return EmbeddingGenerator(settings)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def make_document():
    """Build a Document from (text, embedding) pairs."""

    def _make(
        doc_type=DocumentType.resume,
        chunks=(),
        user_id="user-1",
        age_minutes=0,
    ) -> Document:
        return Document(
            user_id=user_id,
            type=doc_type,
            filename=f"{doc_type.value}.pdf",
            chunks=[Chunk(text=t, embedding=e) for t, e in chunks],
            created_at=datetime.now(timezone.utc) - timedelta(minutes=age_minutes),
        )

    return _make
