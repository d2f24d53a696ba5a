from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def find_one(
        self, email: Optional[str] = None, username: Optional[str] = None
    ) -> Optional[User]:
        """Get a user whose email OR username matches"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Raises:
            DuplicateKeyError: email or username is already stored
        """
        pass
