from typing import Any, List, Mapping, Optional

from src.app.repositories.account_repository import IAccountRepository
from src.app.services.document_store import ID_FIELD, IDocumentCollection
from src.domain.contracts import AddAccountInput
from src.domain.entities import Account


def map_document(document: Mapping[str, Any]) -> Account:
    """Rename the storage identifier to the public id and drop it from the shape"""
    data = dict(document)
    data["id"] = str(data.pop(ID_FIELD))
    return Account.model_validate(data)


class AccountDocumentRepository(IAccountRepository):
    """Account repository implementation over a document collection"""

    def __init__(self, collection: IDocumentCollection):
        self.collection = collection

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        document = await self.collection.find_one({"email": email})
        return map_document(document) if document else None

    async def add(self, account_data: AddAccountInput) -> Account:
        """Create a new account"""
        document = account_data.model_dump()
        result = await self.collection.insert_one(document)
        return map_document({**document, ID_FIELD: result.inserted_id})

    async def load_all(self) -> List[Account]:
        """Get all accounts"""
        documents = await self.collection.find({})
        return [map_document(document) for document in documents]

    async def load_by_id(self, account_id: str) -> Optional[Account]:
        """Get account by ID"""
        document = await self.collection.find_one({ID_FIELD: account_id})
        return map_document(document) if document else None
