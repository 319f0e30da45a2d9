from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError

from src.app.errors import SigningError, VerificationError
from src.app.services.cryptography import IDecrypter, IEncrypter


class JwtAdapter(IEncrypter, IDecrypter):
    """
    Signs and verifies access tokens with a shared secret.

    Tokens carry a single ``id`` claim (plus ``exp`` when an expiry is
    configured). The secret is fixed for the adapter's lifetime.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: Optional[timedelta] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    async def encrypt(self, value: str) -> str:
        """
        Generate a signed access token

        Args:
            value: Account id to embed

        Returns:
            JWT token string

        Raises:
            SigningError: secret missing or signing failed
        """
        if not self._secret or not isinstance(self._secret, str):
            raise SigningError("Signing secret is not configured")

        payload = {"id": value}
        if self._expires_in is not None:
            payload["exp"] = datetime.now(UTC) + self._expires_in

        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (JOSEError, TypeError, ValueError) as exc:
            raise SigningError(f"Could not sign access token: {exc}") from exc

    async def decrypt(self, token: str) -> str:
        """
        Verify an access token and return the embedded id

        Raises:
            VerificationError: token malformed, tampered, expired or foreign
        """
        if not self._secret:
            raise VerificationError("Signing secret is not configured")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except (JOSEError, TypeError, ValueError) as exc:
            raise VerificationError(f"Invalid access token: {exc}") from exc

        value = payload.get("id")
        if not isinstance(value, str) or not value:
            raise VerificationError("Access token carries no id claim")
        return value
