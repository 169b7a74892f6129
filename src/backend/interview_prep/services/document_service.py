"""Document ingestion: chunk extracted text, embed each chunk, store."""

import logging

from interview_prep.models.schemas import Chunk, Document, DocumentType
from interview_prep.services.chunker import DEFAULT_MAX_WORDS, chunk_text
from interview_prep.services.document_store import DocumentStore
from interview_prep.services.embedding_service import EmbeddingGenerator

logger = logging.getLogger(__name__)


async def ingest_document(
    user_id: str,
    doc_type: DocumentType,
    filename: str,
    text: str,
    generator: EmbeddingGenerator,
    store: DocumentStore,
    max_words: int = DEFAULT_MAX_WORDS,
) -> Document:
    """Chunk and embed ``text``, then store it as the user's ``doc_type`` document.

    Any earlier document of the same type is replaced.
    """
    texts = chunk_text(text, max_words=max_words)
    embeddings = await generator.embed_many(texts)

    document = Document(
        user_id=user_id,
        type=doc_type,
        filename=filename,
        chunks=[Chunk(text=t, embedding=e) for t, e in zip(texts, embeddings)],
    )
    replaced = await store.save(document)

    logger.info(
        "Stored %s %s for user %s: %d chunks from %d characters",
        doc_type.value, document.id, user_id, len(texts), len(text),
    )
    if replaced is not None:
        logger.info("Replaced previous %s %s", doc_type.value, replaced.id)
    return document
