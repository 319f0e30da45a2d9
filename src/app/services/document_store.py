from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

Document = Dict[str, Any]

# Storage-internal identifier field of every stored document
ID_FIELD = "_id"


class InsertOneResult(BaseModel):
    inserted_id: str


class IDocumentCollection(ABC):
    """
    Document collection interface - application layer

    Filters are equality maps over top-level fields. The storage identifier
    is exposed as ``_id`` and may be used as a filter key. Implementations
    raise PersistenceError when the store is unavailable and
    DuplicateKeyError when an insert collides on a unique field.
    """

    name: str

    @abstractmethod
    async def find_one(self, filter: Mapping[str, Any]) -> Optional[Document]:
        """Get the first document matching the filter"""
        pass

    @abstractmethod
    async def find(self, filter: Optional[Mapping[str, Any]] = None) -> List[Document]:
        """Get all documents matching the filter"""
        pass

    @abstractmethod
    async def insert_one(self, document: Mapping[str, Any]) -> InsertOneResult:
        """Insert a single document atomically"""
        pass

    @abstractmethod
    async def insert_many(self, documents: List[Mapping[str, Any]]) -> List[str]:
        """Insert documents all-or-nothing, returning their identifiers"""
        pass

    @abstractmethod
    async def delete_many(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        """Delete matching documents, returning how many were removed"""
        pass
