from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing - application layer"""

    @abstractmethod
    async def hash(self, password: str) -> str:
        pass

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        pass
