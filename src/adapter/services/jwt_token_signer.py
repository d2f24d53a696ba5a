from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from src.app.services.token_signer import ITokenSigner, TokenType


class TokenSettings(BaseModel):
    """Signing configuration, injected at construction"""

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=7)


class JwtTokenSigner(ITokenSigner):
    """
    python-jose implementation of ITokenSigner

    Access and refresh tokens are signed with different secrets and carry
    a "type" claim, so one class of token is never accepted as the other.
    """

    def __init__(self, settings: TokenSettings):
        self.settings = settings

    async def sign_access(self, claims: dict) -> str:
        return self._sign(claims, TokenType.access)

    async def sign_refresh(self, claims: dict) -> str:
        return self._sign(claims, TokenType.refresh)

    def verify(self, token: str, token_type: TokenType) -> Optional[dict]:
        try:
            payload = jwt.decode(
                token,
                self._secret_for(token_type),
                algorithms=[self.settings.algorithm],
            )
        except JWTError:
            return None

        if payload.get("type") != token_type.value:
            return None
        return payload

    def expires_in(self, token_type: TokenType) -> timedelta:
        if token_type == TokenType.access:
            return self.settings.access_expires
        return self.settings.refresh_expires

    def _secret_for(self, token_type: TokenType) -> str:
        if token_type == TokenType.access:
            return self.settings.access_secret
        return self.settings.refresh_secret

    def _sign(self, claims: dict, token_type: TokenType) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "type": token_type.value,
            "exp": now + self.expires_in(token_type),
            "iat": now,
        }
        return jwt.encode(
            payload, self._secret_for(token_type), algorithm=self.settings.algorithm
        )
