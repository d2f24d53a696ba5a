from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class TokenType(str, Enum):
    """Token classes issued on authentication"""

    access = "access"
    refresh = "refresh"


class ITokenSigner(ABC):
    """Signs opaque bearer tokens - application layer"""

    @abstractmethod
    async def sign_access(self, claims: dict) -> str:
        pass

    @abstractmethod
    async def sign_refresh(self, claims: dict) -> str:
        pass

    @abstractmethod
    def verify(self, token: str, token_type: TokenType) -> Optional[dict]:
        """Decoded claims, or None if the token is invalid, expired or of another class"""
        pass
