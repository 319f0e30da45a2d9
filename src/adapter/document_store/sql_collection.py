import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.document_store.models import StoredDocument
from src.app.errors import DuplicateKeyError, PersistenceError
from src.app.services.document_store import (
    ID_FIELD,
    Document,
    IDocumentCollection,
    InsertOneResult,
)
from src.domain.base import generate_uuid

logger = logging.getLogger(__name__)


class SqlDocumentCollection(IDocumentCollection):
    """Document collection implementation using SQLModel"""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        name: str,
        unique_field: Optional[str] = None,
    ):
        self.session_factory = session_factory
        self.name = name
        self.unique_field = unique_field

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        # One session per operation; every write commits exactly once
        try:
            async with self.session_factory() as session:
                yield session
        except IntegrityError as exc:
            raise DuplicateKeyError(self.name, self.unique_field or ID_FIELD) from exc
        except SQLAlchemyError as exc:
            logger.error(f"Document store failure on '{self.name}': {exc}")
            raise PersistenceError(f"Document store unavailable for '{self.name}'") from exc

    def _where(self, filter: Optional[Mapping[str, Any]]) -> list:
        clauses = [StoredDocument.collection == self.name]
        for key, value in (filter or {}).items():
            if key == ID_FIELD:
                clauses.append(StoredDocument.oid == str(value))
            elif key == self.unique_field:
                clauses.append(StoredDocument.unique_key == value)
            elif isinstance(value, bool):
                clauses.append(StoredDocument.body[key].as_boolean() == value)
            elif isinstance(value, int):
                clauses.append(StoredDocument.body[key].as_integer() == value)
            elif isinstance(value, float):
                clauses.append(StoredDocument.body[key].as_float() == value)
            elif isinstance(value, str):
                clauses.append(StoredDocument.body[key].as_string() == value)
            else:
                raise ValueError(f"Unsupported filter value for '{key}': {value!r}")
        return clauses

    def _to_row(self, document: Mapping[str, Any]) -> StoredDocument:
        body = dict(document)
        oid = str(body.pop(ID_FIELD, None) or generate_uuid())
        unique_key = body.get(self.unique_field) if self.unique_field else None
        return StoredDocument(
            oid=oid, collection=self.name, unique_key=unique_key, body=body
        )

    @staticmethod
    def _to_document(row: StoredDocument) -> Document:
        return {ID_FIELD: row.oid, **row.body}

    async def find_one(self, filter: Mapping[str, Any]) -> Optional[Document]:
        async with self._session() as session:
            stmt = select(StoredDocument).where(*self._where(filter))
            result = await session.exec(stmt)
            row = result.first()
        return self._to_document(row) if row else None

    async def find(self, filter: Optional[Mapping[str, Any]] = None) -> List[Document]:
        async with self._session() as session:
            stmt = select(StoredDocument).where(*self._where(filter))
            result = await session.exec(stmt)
            rows = result.all()
        return [self._to_document(row) for row in rows]

    async def insert_one(self, document: Mapping[str, Any]) -> InsertOneResult:
        row = self._to_row(document)
        inserted_id = row.oid
        async with self._session() as session:
            session.add(row)
            await session.commit()
        return InsertOneResult(inserted_id=inserted_id)

    async def insert_many(self, documents: List[Mapping[str, Any]]) -> List[str]:
        rows = [self._to_row(document) for document in documents]
        inserted_ids = [row.oid for row in rows]
        async with self._session() as session:
            session.add_all(rows)
            await session.commit()
        return inserted_ids

    async def delete_many(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        async with self._session() as session:
            result = await session.exec(
                select(StoredDocument).where(*self._where(filter))
            )
            rows = result.all()
            for row in rows:
                await session.delete(row)
            await session.commit()
        return len(rows)
