"""Helpers for delivering auth tokens as HTTP-only cookies."""

from typing import Literal, Optional

from fastapi import Response
from pydantic import BaseModel

from src.app.use_cases.auth import TokenPair

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


class CookieSettings(BaseModel):
    secure: bool = False
    samesite: Literal["lax", "strict", "none"] = "lax"
    path: str = "/"
    domain: Optional[str] = None
    access_max_age: int = 15 * 60
    refresh_max_age: int = 7 * 24 * 60 * 60


def set_auth_cookies(response: Response, tokens: TokenPair, settings: CookieSettings) -> None:
    """Both cookies are HttpOnly; Max-Age follows each token's lifetime."""
    options = {
        "httponly": True,
        "secure": settings.secure,
        "samesite": settings.samesite,
        "path": settings.path,
    }
    if settings.domain:
        options["domain"] = settings.domain

    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        tokens.access_token,
        max_age=settings.access_max_age,
        **options,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        tokens.refresh_token,
        max_age=settings.refresh_max_age,
        **options,
    )
