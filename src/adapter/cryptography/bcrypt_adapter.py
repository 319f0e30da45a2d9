import bcrypt

from src.app.services.cryptography import IHashComparer, IHasher


class BcryptAdapter(IHasher, IHashComparer):
    """Password hashing with bcrypt (cost factor 12 by default)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    async def hash(self, value: str) -> str:
        hashed = bcrypt.hashpw(value.encode("utf-8"), bcrypt.gensalt(self.rounds))
        return hashed.decode("utf-8")

    async def compare(self, value: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(value.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
