"""Per-user document storage.

A user holds at most one document per ``DocumentType``; saving a document
replaces any earlier one of the same type. Two backends share the interface:
an in-process dict (default, single worker) and Redis, where each document is
stored as pydantic JSON under a user-namespaced key.
"""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

import redis.asyncio as redis

from interview_prep.models.schemas import Document, DocumentType

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    @abstractmethod
    async def save(self, document: Document) -> Document | None:
        """Store ``document``, returning the document it replaced, if any."""

    @abstractmethod
    async def get(self, user_id: str, doc_type: DocumentType) -> Document | None:
        ...

    @abstractmethod
    async def list_documents(self, user_id: str) -> list[Document]:
        """All of the user's documents, newest first."""

    @abstractmethod
    async def delete(self, user_id: str, document_id: UUID) -> bool:
        """Delete one of the user's documents by id. False if it was not found."""


class InMemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self._documents: dict[str, dict[DocumentType, Document]] = {}

    async def save(self, document: Document) -> Document | None:
        user_docs = self._documents.setdefault(document.user_id, {})
        replaced = user_docs.get(document.type)
        user_docs[document.type] = document
        return replaced

    async def get(self, user_id: str, doc_type: DocumentType) -> Document | None:
        return self._documents.get(user_id, {}).get(doc_type)

    async def list_documents(self, user_id: str) -> list[Document]:
        docs = list(self._documents.get(user_id, {}).values())
        return sorted(docs, key=lambda d: d.created_at, reverse=True)

    async def delete(self, user_id: str, document_id: UUID) -> bool:
        user_docs = self._documents.get(user_id, {})
        for doc_type, document in list(user_docs.items()):
            if document.id == document_id:
                del user_docs[doc_type]
                return True
        return False


def _document_key(user_id: str, doc_type: DocumentType) -> str:
    return f"user:{user_id}:document:{doc_type.value}"


# Deletes KEYS[1] only while it still holds the document whose id is ARGV[1]
DELETE_IF_ID_SCRIPT = """\
local value = redis.call('GET', KEYS[1])
if value and cjson.decode(value)['id'] == ARGV[1] then
  return redis.call('DEL', KEYS[1])
end
return 0
"""


class RedisDocumentStore(DocumentStore):
    def __init__(self, client: redis.Redis, ttl: int | None = None):
        self._client = client
        self._ttl = ttl

    @classmethod
    def from_url(cls, url: str, ttl: int | None = None) -> "RedisDocumentStore":
        return cls(redis.from_url(url, decode_responses=True), ttl=ttl)

    async def save(self, document: Document) -> Document | None:
        key = _document_key(document.user_id, document.type)
        # SET ... GET (redis >= 6.2) swaps in the new value and returns the old one
        previous = await self._client.set(
            key, document.model_dump_json(), ex=self._ttl, get=True
        )
        if previous is None:
            return None
        return Document.model_validate_json(previous)

    async def get(self, user_id: str, doc_type: DocumentType) -> Document | None:
        data = await self._client.get(_document_key(user_id, doc_type))
        if data is None:
            return None
        return Document.model_validate_json(data)

    async def list_documents(self, user_id: str) -> list[Document]:
        keys = [_document_key(user_id, doc_type) for doc_type in DocumentType]
        values = await self._client.mget(keys)
        docs = [Document.model_validate_json(v) for v in values if v is not None]
        return sorted(docs, key=lambda d: d.created_at, reverse=True)

    async def delete(self, user_id: str, document_id: UUID) -> bool:
        for doc_type in DocumentType:
            deleted = await self._client.eval(
                DELETE_IF_ID_SCRIPT, 1, _document_key(user_id, doc_type), str(document_id)
            )
            if deleted:
                logger.info("Deleted %s document %s for user %s", doc_type.value, document_id, user_id)
                return True
        return False
