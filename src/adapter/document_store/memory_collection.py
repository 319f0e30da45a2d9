import asyncio
import copy
from typing import Any, Dict, List, Mapping, Optional

from src.app.errors import DuplicateKeyError
from src.app.services.document_store import (
    ID_FIELD,
    Document,
    IDocumentCollection,
    InsertOneResult,
)
from src.domain.base import generate_uuid


class InMemoryDocumentCollection(IDocumentCollection):
    """In-process document collection, used for tests and local runs"""

    def __init__(self, name: str, unique_field: Optional[str] = None):
        self.name = name
        self.unique_field = unique_field
        self._documents: Dict[str, Document] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def _matches(document: Document, filter: Optional[Mapping[str, Any]]) -> bool:
        return all(
            key in document and document[key] == value
            for key, value in (filter or {}).items()
        )

    def _prepare(self, document: Mapping[str, Any]) -> Document:
        stored = copy.deepcopy(dict(document))
        stored[ID_FIELD] = str(stored.get(ID_FIELD) or generate_uuid())
        return stored

    def _check_unique(self, documents: List[Document]) -> None:
        seen_ids = set(self._documents)
        seen_keys = {
            doc.get(self.unique_field)
            for doc in self._documents.values()
            if self.unique_field and doc.get(self.unique_field) is not None
        }
        for document in documents:
            if document[ID_FIELD] in seen_ids:
                raise DuplicateKeyError(self.name, ID_FIELD)
            seen_ids.add(document[ID_FIELD])
            if self.unique_field:
                key = document.get(self.unique_field)
                if key is not None and key in seen_keys:
                    raise DuplicateKeyError(self.name, self.unique_field)
                seen_keys.add(key)

    async def find_one(self, filter: Mapping[str, Any]) -> Optional[Document]:
        for document in self._documents.values():
            if self._matches(document, filter):
                return copy.deepcopy(document)
        return None

    async def find(self, filter: Optional[Mapping[str, Any]] = None) -> List[Document]:
        return [
            copy.deepcopy(document)
            for document in self._documents.values()
            if self._matches(document, filter)
        ]

    async def insert_one(self, document: Mapping[str, Any]) -> InsertOneResult:
        inserted_ids = await self.insert_many([document])
        return InsertOneResult(inserted_id=inserted_ids[0])

    async def insert_many(self, documents: List[Mapping[str, Any]]) -> List[str]:
        prepared = [self._prepare(document) for document in documents]
        async with self._lock:
            self._check_unique(prepared)
            for document in prepared:
                self._documents[document[ID_FIELD]] = document
        return [document[ID_FIELD] for document in prepared]

    async def delete_many(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        async with self._lock:
            doomed = [
                oid
                for oid, document in self._documents.items()
                if self._matches(document, filter)
            ]
            for oid in doomed:
                del self._documents[oid]
        return len(doomed)
