"""Tests for the interview orchestration: session start and answer scoring."""

import random

import pytest

from interview_prep.core.config import Settings
from interview_prep.models.schemas import DocumentType
from interview_prep.prompts.interview import FALLBACK_QUESTIONS
from interview_prep.services.document_service import ingest_document
from interview_prep.services.embedding_service import EmbeddingGenerator, fallback_embedding
from interview_prep.services.feedback import KeywordFeedbackStrategy
from interview_prep.services.interview_service import answer_question, start_session
from conftest import StubEmbeddings


@pytest.fixture
def strategy():
    return KeywordFeedbackStrategy(random.Random(0))


class TestIngestDocument:
    @pytest.mark.asyncio
    async def test_chunks_and_embeds_each_chunk(self, store, generator):
        doc = await ingest_document(
            user_id="user-1",
            doc_type=DocumentType.resume,
            filename="cv.pdf",
            text="one two three four five",
            generator=generator,
            store=store,
            max_words=2,
        )

        assert [c.text for c in doc.chunks] == ["one two", "three four", "five"]
        assert doc.chunks[2].embedding == fallback_embedding("five")
        assert all(len(c.embedding) == 384 for c in doc.chunks)
        assert await store.get("user-1", DocumentType.resume) == doc

    @pytest.mark.asyncio
    async def test_reupload_replaces_previous(self, store, generator):
        first = await ingest_document("user-1", DocumentType.resume, "a.pdf", "old text", generator, store)
        second = await ingest_document("user-1", DocumentType.resume, "b.pdf", "new text", generator, store)

        docs = await store.list_documents("user-1")
        assert [d.id for d in docs] == [second.id]
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_empty_text_stores_document_without_chunks(self, store, generator):
        doc = await ingest_document("user-1", DocumentType.resume, "blank.pdf", "", generator, store)
        assert doc.chunks == []


class TestStartSession:
    @pytest.mark.asyncio
    async def test_requires_documents(self, store, settings):
        with pytest.raises(ValueError, match="No documents found"):
            await start_session("user-1", store, None, settings)

    @pytest.mark.asyncio
    async def test_requires_both_types(self, store, settings, make_document):
        await store.save(make_document(DocumentType.resume, [("cv", [1.0])]))
        with pytest.raises(ValueError, match="Both resume and job description"):
            await start_session("user-1", store, None, settings)

    @pytest.mark.asyncio
    async def test_welcome_message_with_fallback_questions(self, store, settings, make_document):
        await store.save(make_document(DocumentType.resume, [("cv", [1.0])]))
        await store.save(make_document(DocumentType.job_description, [("jd", [1.0])]))

        result = await start_session("user-1", store, None, settings)

        assert result.message == "Chat session started"
        assert FALLBACK_QUESTIONS in result.initial_message


class TestAnswerQuestion:
    @pytest.mark.asyncio
    async def test_returns_ranked_citations(self, store, make_document, strategy):
        settings = Settings(openai_api_key="", embedding_dim=2, retrieval_top_k=2)
        generator = EmbeddingGenerator(settings, model=StubEmbeddings(vector=[1.0, 0.0]))
        await store.save(make_document(DocumentType.resume, [
            ("Python at Acme", [0.9, 0.1]),
            ("Hobbies: chess", [0.0, 1.0]),
        ]))
        await store.save(make_document(DocumentType.job_description, [
            ("Needs Python and SQL", [0.7, 0.3]),
        ]))

        result = await answer_question(
            "user-1", "I used Python daily", store, generator, None, strategy, settings
        )

        assert [c.text for c in result.citations] == ["Python at Acme", "Needs Python and SQL"]
        assert [c.source_type for c in result.citations] == [
            DocumentType.resume,
            DocumentType.job_description,
        ]
        assert result.citations[0].similarity > result.citations[1].similarity
        assert 6 <= result.score <= 8

    @pytest.mark.asyncio
    async def test_without_documents_has_no_citations(self, store, generator, settings, strategy):
        result = await answer_question(
            "user-1", "I collaborate well", store, generator, None, strategy, settings
        )
        assert result.citations == []
        assert "teamwork" in result.response
