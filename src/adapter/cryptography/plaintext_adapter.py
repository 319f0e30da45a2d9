import hmac

from src.app.services.cryptography import IHashComparer, IHasher


class PlaintextAdapter(IHasher, IHashComparer):
    """Stores secrets as given; comparison is constant-time"""

    async def hash(self, value: str) -> str:
        return value

    async def compare(self, value: str, hashed: str) -> bool:
        return hmac.compare_digest(value.encode("utf-8"), hashed.encode("utf-8"))
