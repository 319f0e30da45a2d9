from abc import ABC, abstractmethod


class IEncrypter(ABC):
    """Turns an identity value into an opaque access token"""

    @abstractmethod
    async def encrypt(self, value: str) -> str:
        pass


class IDecrypter(ABC):
    """Verifies an access token and returns the identity it carries"""

    @abstractmethod
    async def decrypt(self, token: str) -> str:
        pass


class IHasher(ABC):
    """Transforms a secret before it is stored"""

    @abstractmethod
    async def hash(self, value: str) -> str:
        pass


class IHashComparer(ABC):
    """Compares a plain secret against its stored form"""

    @abstractmethod
    async def compare(self, value: str, hashed: str) -> bool:
        pass
