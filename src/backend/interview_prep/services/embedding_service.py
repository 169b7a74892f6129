"""Embedding generation with a deterministic fallback.

Flow:
  1. Ask the configured embedding model (OpenAI text-embedding-3-small,
     requested at ``embedding_dim`` dimensions) for a vector, time-bounded
  2. If there is no model, the call fails, times out, or the vector has the
     wrong dimensionality, derive a fallback vector from the text length

Every vector handed out therefore has ``settings.embedding_dim`` elements.
"""

import asyncio
import logging

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from interview_prep.core.config import Settings

logger = logging.getLogger(__name__)

FALLBACK_DIM = 384


def fallback_embedding(text: str, dim: int = FALLBACK_DIM) -> list[float]:
    """Derive a vector from the character length of ``text``.

    Texts of equal length always map to the same vector.
    """
    seed = len(text) % 100
    return [(seed + i) / 1000 for i in range(dim)]


class EmbeddingGenerator:
    """Turns text into fixed-length vectors; never raises."""

    def __init__(self, settings: Settings, model: Embeddings | None = None):
        self._settings = settings
        self._model = model

    @property
    def dimension(self) -> int:
        return self._settings.embedding_dim

    def _get_model(self) -> Embeddings | None:
        if self._model is None and self._settings.openai_api_key:
            self._model = OpenAIEmbeddings(
                model=self._settings.embedding_model,
                api_key=self._settings.openai_api_key,
                dimensions=self._settings.embedding_dim,
            )
        return self._model

    async def embed(self, text: str) -> list[float]:
        """Embed a single text, falling back on any failure."""
        try:
            model = self._get_model()
            if model is None:
                logger.debug("No embedding model configured, using fallback vector")
                return fallback_embedding(text, self.dimension)

            vector = await asyncio.wait_for(
                model.aembed_query(text),
                timeout=self._settings.embedding_timeout,
            )
        except Exception as exc:
            logger.warning("Embedding API error, using fallback vector: %r", exc)
            return fallback_embedding(text, self.dimension)

        if len(vector) != self.dimension:
            logger.warning(
                "Embedding model returned %d dimensions, expected %d; using fallback vector",
                len(vector), self.dimension,
            )
            return fallback_embedding(text, self.dimension)
        return vector

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        """Embed texts one at a time, in order."""
        return [await self.embed(text) for text in texts]
