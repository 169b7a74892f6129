"""API routes; every endpoint is scoped to the calling user."""

import uuid

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from langchain_core.language_models import BaseChatModel

from interview_prep.core.auth import UserContext, get_user
from interview_prep.core.config import Settings
from interview_prep.core.dependencies import (
    get_document_store,
    get_embedding_generator,
    get_feedback_strategy,
    get_llm,
    get_settings,
)
from interview_prep.models.schemas import (
    ChatQueryRequest,
    ChatQueryResponse,
    ChatStartResponse,
    DocumentResponse,
    DocumentType,
    UploadResponse,
)
from interview_prep.services.document_service import ingest_document
from interview_prep.services.document_store import DocumentStore
from interview_prep.services.embedding_service import EmbeddingGenerator
from interview_prep.services.feedback import FeedbackStrategy
from interview_prep.services.interview_service import answer_question, start_session
from interview_prep.services.pdf_service import extract_text_from_pdf

router = APIRouter()

PDF_CONTENT_TYPE = "application/pdf"


# --- Document endpoints ---


@router.post("/documents/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED, tags=["Documents"])
async def upload_document(
    file: UploadFile = File(..., description="PDF resume or job description"),
    doc_type: DocumentType = Form(..., alias="type", description="resume or job_description"),
    user: UserContext = Depends(get_user),
    store: DocumentStore = Depends(get_document_store),
    generator: EmbeddingGenerator = Depends(get_embedding_generator),
    settings: Settings = Depends(get_settings),
):
    """Upload a PDF. Text is extracted, chunked and embedded; it replaces any earlier document of the same type."""
    if file.content_type != PDF_CONTENT_TYPE:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    pdf_bytes = await file.read()
    if len(pdf_bytes) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_upload_bytes} byte limit",
        )

    try:
        raw_text = extract_text_from_pdf(pdf_bytes)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not raw_text:
        raise HTTPException(status_code=400, detail="Could not extract text from PDF")

    document = await ingest_document(
        user_id=user.user_id,
        doc_type=doc_type,
        filename=file.filename or f"{doc_type.value}.pdf",
        text=raw_text,
        generator=generator,
        store=store,
        max_words=settings.chunk_max_words,
    )
    return UploadResponse(
        message="Document uploaded successfully",
        document=DocumentResponse.from_document(document),
    )


@router.get("/documents", response_model=list[DocumentResponse], tags=["Documents"])
async def list_documents(
    user: UserContext = Depends(get_user),
    store: DocumentStore = Depends(get_document_store),
):
    """List the current user's documents, newest first."""
    documents = await store.list_documents(user.user_id)
    return [DocumentResponse.from_document(d) for d in documents]


@router.delete("/documents/{document_id}", tags=["Documents"])
async def delete_document(
    document_id: uuid.UUID,
    user: UserContext = Depends(get_user),
    store: DocumentStore = Depends(get_document_store),
):
    """Delete one of the current user's documents and its chunks."""
    if not await store.delete(user.user_id, document_id):
        raise HTTPException(status_code=404, detail="Document not found")
    return {"message": "Document deleted successfully"}


# --- Chat endpoints ---


@router.post("/chat/start", response_model=ChatStartResponse, tags=["Chat"])
async def chat_start(
    user: UserContext = Depends(get_user),
    store: DocumentStore = Depends(get_document_store),
    llm: BaseChatModel | None = Depends(get_llm),
    settings: Settings = Depends(get_settings),
):
    """Start an interview session. Requires both a resume and a job description."""
    try:
        return await start_session(user.user_id, store, llm, settings)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/chat/query", response_model=ChatQueryResponse, tags=["Chat"])
async def chat_query(
    body: ChatQueryRequest,
    user: UserContext = Depends(get_user),
    store: DocumentStore = Depends(get_document_store),
    generator: EmbeddingGenerator = Depends(get_embedding_generator),
    llm: BaseChatModel | None = Depends(get_llm),
    strategy: FeedbackStrategy = Depends(get_feedback_strategy),
    settings: Settings = Depends(get_settings),
):
    """Score an answer (1-10) with feedback and the most relevant resume / job description excerpts."""
    return await answer_question(
        user_id=user.user_id,
        message=body.message,
        store=store,
        generator=generator,
        llm=llm,
        strategy=strategy,
        settings=settings,
    )
