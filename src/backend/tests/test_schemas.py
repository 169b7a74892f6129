"""Tests for Pydantic schema validation."""

import pytest
from pydantic import ValidationError

from interview_prep.models.schemas import (
    ChatQueryRequest,
    ChatQueryResponse,
    Chunk,
    Document,
    DocumentResponse,
    DocumentType,
    Feedback,
    SimilarityResult,
)


class TestChunk:
    def test_chunk_is_immutable(self):
        chunk = Chunk(text="Python", embedding=[0.1, 0.2])
        with pytest.raises(ValidationError):
            chunk.text = "Go"


class TestDocument:
    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            Document(user_id="u", type="cover_letter", filename="x.pdf")

    def test_full_text_joins_chunks(self):
        doc = Document(
            user_id="u",
            type=DocumentType.resume,
            filename="cv.pdf",
            chunks=[Chunk(text="one two", embedding=[1.0]), Chunk(text="three", embedding=[1.0])],
        )
        assert doc.full_text() == "one two three"

    def test_response_reports_chunk_count(self):
        doc = Document(
            user_id="u",
            type=DocumentType.job_description,
            filename="jd.pdf",
            chunks=[Chunk(text="a", embedding=[1.0])] * 3,
        )
        response = DocumentResponse.from_document(doc)
        assert response.chunk_count == 3
        assert response.uploaded_at == doc.created_at
        assert response.type == DocumentType.job_description


class TestSimilarityResult:
    def test_similarity_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            SimilarityResult(text="x", similarity=1.5, source_type=DocumentType.resume)

    def test_parses_source_type_string(self):
        result = SimilarityResult(text="x", similarity=-0.2, source_type="job_description")
        assert result.source_type == DocumentType.job_description


class TestChat:
    def test_blank_message_rejected(self):
        with pytest.raises(ValidationError):
            ChatQueryRequest(message="   ")

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            ChatQueryRequest(message="")

    @pytest.mark.parametrize("score", [0, 11])
    def test_feedback_score_range(self, score):
        with pytest.raises(ValidationError):
            Feedback(score=score, response="x")

    def test_query_response_serializes_citations(self):
        response = ChatQueryResponse(
            response="Score: 7/10",
            score=7,
            citations=[SimilarityResult(text="t", similarity=0.5, source_type=DocumentType.resume)],
        )
        data = response.model_dump(mode="json")
        assert data["citations"][0] == {"text": "t", "similarity": 0.5, "source_type": "resume"}
