"""Pydantic schemas for stored documents, retrieval results, and API payloads."""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


# --- Enums ---

class DocumentType(str, Enum):
    resume = "resume"
    job_description = "job_description"


# --- Stored documents ---

class Chunk(BaseModel):
    """A slice of extracted document text paired with its embedding."""
    model_config = {"frozen": True}

    text: str
    embedding: list[float]


class Document(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: str
    type: DocumentType
    filename: str
    chunks: list[Chunk] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def full_text(self) -> str:
        return " ".join(chunk.text for chunk in self.chunks)


# --- Retrieval ---

class SimilarityResult(BaseModel):
    text: str
    similarity: float = Field(ge=-1.0, le=1.0)
    source_type: DocumentType


# --- Document endpoints ---

class DocumentResponse(BaseModel):
    id: UUID
    type: DocumentType
    filename: str
    chunk_count: int
    uploaded_at: datetime

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            type=document.type,
            filename=document.filename,
            chunk_count=len(document.chunks),
            uploaded_at=document.created_at,
        )


class UploadResponse(BaseModel):
    message: str
    document: DocumentResponse


# --- Chat endpoints ---

class ChatStartResponse(BaseModel):
    message: str
    initial_message: str


class ChatQueryRequest(BaseModel):
    message: str = Field(min_length=1, examples=["I worked on a payments team for three years."])

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message is required")
        return value


class Feedback(BaseModel):
    """Scored evaluation of one candidate answer."""
    score: int = Field(ge=1, le=10)
    response: str


class ChatQueryResponse(BaseModel):
    response: str
    score: int = Field(ge=1, le=10)
    citations: list[SimilarityResult]
