"""Cosine-similarity ranking of stored document chunks against a query.

Chunks are scored in document order; the sort is stable, so equal scores keep
the order in which the chunks were stored.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from interview_prep.models.schemas import Document, SimilarityResult
from interview_prep.services.embedding_service import EmbeddingGenerator

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 2


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors of equal length.

    A zero-magnitude (or non-finite) vector has no direction; its similarity
    to anything is 0.0.
    """
    if len(a) != len(b):
        raise ValueError(f"Vector dimensions differ: {len(a)} != {len(b)}")

    ua = _unit(np.asarray(a, dtype=float))
    ub = _unit(np.asarray(b, dtype=float))
    if ua is None or ub is None:
        return 0.0
    # Rounding can push the dot product of two unit vectors slightly past 1
    return float(np.clip(np.dot(ua, ub), -1.0, 1.0))


def _unit(vector: np.ndarray) -> np.ndarray | None:
    """Unit vector in the direction of ``vector``; None if it has none.

    Dividing by the largest element first keeps the norm from under- or
    overflowing for very small or very large components.
    """
    if vector.size == 0 or not np.all(np.isfinite(vector)):
        return None
    scale = np.abs(vector).max()
    if scale == 0:
        return None
    scaled = vector / scale
    return scaled / np.linalg.norm(scaled)


def rank_chunks(
    query_vector: Sequence[float],
    documents: Iterable[Document],
    top_k: int = DEFAULT_TOP_K,
) -> list[SimilarityResult]:
    """Return the ``top_k`` chunks most similar to ``query_vector``, best first.

    Chunks whose embedding dimensionality differs from the query are skipped.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    scored: list[SimilarityResult] = []
    skipped = 0
    for document in documents:
        for chunk in document.chunks:
            if len(chunk.embedding) != len(query_vector):
                skipped += 1
                continue
            scored.append(
                SimilarityResult(
                    text=chunk.text,
                    similarity=cosine_similarity(query_vector, chunk.embedding),
                    source_type=document.type,
                )
            )

    if skipped:
        logger.warning(
            "Skipped %d chunk(s) whose embedding dimension differs from the query (%d)",
            skipped, len(query_vector),
        )

    scored.sort(key=lambda r: r.similarity, reverse=True)
    return scored[:top_k]


async def find_similar_chunks(
    query: str,
    documents: Iterable[Document],
    generator: EmbeddingGenerator,
    top_k: int = DEFAULT_TOP_K,
) -> list[SimilarityResult]:
    """Embed ``query`` and rank the documents' chunks against it."""
    query_vector = await generator.embed(query)
    return rank_chunks(query_vector, documents, top_k=top_k)
