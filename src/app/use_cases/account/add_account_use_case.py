from typing import Optional

from src.app.repositories.account_repository import IAccountRepository
from src.app.services.cryptography import IHasher
from src.domain.contracts import AddAccountInput
from src.domain.entities import Account


class AddAccountUseCase:
    """
    Add Account Use Case

    Business Logic:
    1. Check if email already exists
    2. Transform the password with the configured hasher
    3. Create the account through the repository

    A duplicate email is an expected outcome and yields None. Repository
    failures propagate unchanged. The duplicate check is not atomic with
    the insert; the storage unique constraint on email is the real guard.
    """

    def __init__(self, repository: IAccountRepository, hasher: IHasher):
        self.repository = repository
        self.hasher = hasher

    async def add(self, account_data: AddAccountInput) -> Optional[Account]:
        existing_account = await self.repository.find_by_email(account_data.email)
        if existing_account:
            return None

        hashed_password = await self.hasher.hash(account_data.password)
        return await self.repository.add(
            account_data.model_copy(update={"password": hashed_password})
        )
