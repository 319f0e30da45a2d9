"""
Authentication Service

Exchanges credentials for a signed access token.
"""

from src.app.errors import InvalidCredentialsError
from src.app.repositories.account_repository import IAccountRepository
from src.app.services.cryptography import IEncrypter, IHashComparer
from src.domain.contracts import AuthenticationInput


class AuthenticationService:
    """
    Use case for credential verification and token issuance.

    Business Rules:
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - Password comparison is delegated to the injected IHashComparer
    - Token carries the account id only
    - Repository and encrypter failures propagate unchanged
    """

    def __init__(
        self,
        repository: IAccountRepository,
        hash_comparer: IHashComparer,
        encrypter: IEncrypter,
    ):
        self.repository = repository
        self.hash_comparer = hash_comparer
        self.encrypter = encrypter

    async def auth(self, credentials: AuthenticationInput) -> str:
        """
        Authenticate credentials.

        Args:
            credentials: AuthenticationInput with email and plain password

        Returns:
            Access token for the matching account

        Raises:
            InvalidCredentialsError: unknown email or password mismatch
        """
        account = await self.repository.find_by_email(credentials.email)
        if account is None:
            raise InvalidCredentialsError()

        password_valid = await self.hash_comparer.compare(
            credentials.password, account.password
        )
        if not password_valid:
            raise InvalidCredentialsError()

        return await self.encrypter.encrypt(account.id)
