"""
Stored Document Table

Backing table for every SQL document collection.
"""

from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column, String, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.domain.base import generate_uuid


class StoredDocument(SQLModel, table=True):
    """
    One document of one collection.

    Business Rules:
    - Primary key column is named _id, the storage-internal identifier
    - unique_key mirrors the collection's unique field, enforced per collection
    """

    __tablename__ = "documents"

    oid: str = Field(
        default_factory=generate_uuid,
        sa_column=Column("_id", String(36), primary_key=True),
    )
    collection: str = Field(index=True, max_length=64)
    unique_key: Optional[str] = Field(default=None, max_length=320)
    body: Dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )

    __table_args__ = (
        UniqueConstraint(
            "collection", "unique_key", name="uq_documents_collection_unique_key"
        ),
    )
