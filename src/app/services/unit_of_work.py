from abc import ABC, abstractmethod

from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """
        Raises:
            DuplicateKeyError: a pending write violates a uniqueness constraint
        """
        pass

    @abstractmethod
    async def rollback(self):
        pass
