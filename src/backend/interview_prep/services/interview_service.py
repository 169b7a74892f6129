"""Orchestrator: ties together document lookup, retrieval, and LLM feedback."""

import logging

from langchain_core.language_models import BaseChatModel

from interview_prep.core.config import Settings
from interview_prep.models.schemas import (
    ChatQueryResponse,
    ChatStartResponse,
    Document,
    DocumentType,
)
from interview_prep.prompts.interview import build_welcome_message
from interview_prep.services import llm_service
from interview_prep.services.document_store import DocumentStore
from interview_prep.services.embedding_service import EmbeddingGenerator
from interview_prep.services.feedback import FeedbackStrategy
from interview_prep.services.similarity import find_similar_chunks

logger = logging.getLogger(__name__)

NO_RESUME_TEXT = "No resume available"
NO_JOB_TEXT = "No job description available"


def _by_type(documents: list[Document]) -> dict[DocumentType, Document]:
    return {doc.type: doc for doc in documents}


def _excerpt(document: Document | None, limit: int, default: str) -> str:
    if document is None:
        return default
    return document.full_text()[:limit] or default


async def start_session(
    user_id: str,
    store: DocumentStore,
    llm: BaseChatModel | None,
    settings: Settings,
) -> ChatStartResponse:
    """Generate opening questions from the user's job description.

    Raises ValueError unless both a resume and a job description are stored.
    """
    documents = await store.list_documents(user_id)
    if not documents:
        raise ValueError(
            "No documents found. Please upload your resume and job description first."
        )

    docs = _by_type(documents)
    if DocumentType.resume not in docs or DocumentType.job_description not in docs:
        raise ValueError(
            "Both resume and job description must be uploaded before starting chat"
        )

    jd_text = _excerpt(
        docs[DocumentType.job_description], settings.question_context_chars, "General position"
    )
    questions = await llm_service.generate_questions(llm, jd_text)

    logger.info("Started interview session for user %s", user_id)
    return ChatStartResponse(
        message="Chat session started",
        initial_message=build_welcome_message(questions),
    )


async def answer_question(
    user_id: str,
    message: str,
    store: DocumentStore,
    generator: EmbeddingGenerator,
    llm: BaseChatModel | None,
    strategy: FeedbackStrategy,
    settings: Settings,
) -> ChatQueryResponse:
    """Evaluate one candidate answer.

    1. Rank the user's stored chunks against the answer (citations)
    2. Score the answer with the LLM, using the citations as extra context
    3. Fall back to the feedback strategy if the LLM is unavailable
    """
    documents = await store.list_documents(user_id)
    docs = _by_type(documents)

    citations = []
    if documents:
        citations = await find_similar_chunks(
            message, documents, generator, top_k=settings.retrieval_top_k
        )

    feedback = await llm_service.evaluate_answer(
        llm,
        strategy,
        job_description=_excerpt(
            docs.get(DocumentType.job_description), settings.feedback_context_chars, NO_JOB_TEXT
        ),
        resume_text=_excerpt(
            docs.get(DocumentType.resume), settings.feedback_context_chars, NO_RESUME_TEXT
        ),
        message=message,
        citations=citations,
    )

    logger.info(
        "Scored answer for user %s: %d/10 with %d citation(s)",
        user_id, feedback.score, len(citations),
    )
    return ChatQueryResponse(
        response=feedback.response,
        score=feedback.score,
        citations=citations,
    )
