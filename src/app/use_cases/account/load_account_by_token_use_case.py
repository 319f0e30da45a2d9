import logging
from typing import Optional

from src.app.errors import VerificationError
from src.app.repositories.account_repository import IAccountRepository
from src.app.services.cryptography import IDecrypter
from src.domain.entities import Account

logger = logging.getLogger(__name__)


class LoadAccountByTokenUseCase:
    """
    Resolve the account an access token was issued for.

    An unverifiable token is treated as "no account". Repository failures
    propagate unchanged.
    """

    def __init__(self, decrypter: IDecrypter, repository: IAccountRepository):
        self.decrypter = decrypter
        self.repository = repository

    async def load(self, access_token: str) -> Optional[Account]:
        try:
            account_id = await self.decrypter.decrypt(access_token)
        except VerificationError as exc:
            logger.info(f"Rejected access token: {exc}")
            return None

        return await self.repository.load_by_id(account_id)
