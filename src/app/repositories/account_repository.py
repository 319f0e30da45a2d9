from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.contracts import AddAccountInput
from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address, None when absent"""
        pass

    @abstractmethod
    async def add(self, account_data: AddAccountInput) -> Account:
        """Create a new account and return it with its generated id"""
        pass

    @abstractmethod
    async def load_all(self) -> List[Account]:
        """Get every stored account"""
        pass

    @abstractmethod
    async def load_by_id(self, account_id: str) -> Optional[Account]:
        """Get account by ID"""
        pass
