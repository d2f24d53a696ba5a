"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- SignupResult: Output from use case (public profile + token pair)
"""

from typing import Optional

from pydantic import BaseModel

from src.libs.result import Error, Result, Return

VALIDATION_ERROR = "VALIDATION_ERROR"
USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

ALL_FIELDS_REQUIRED_MESSAGE = "All fields are required"
USER_ALREADY_EXISTS_MESSAGE = "Email or username already taken"


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Only built by validate_signup_fields, so every field is a non-empty string.
    """

    name: str
    username: str
    email: str
    password: str


def validate_signup_fields(
    name: Optional[str],
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> Result[SignupCommand]:
    """
    Validation step of the signup flow

    Returns:
        Result[SignupCommand], or Error(VALIDATION_ERROR) if any field
        is missing or empty
    """
    if not all((name, username, email, password)):
        return Return.err(Error(VALIDATION_ERROR, ALL_FIELDS_REQUIRED_MESSAGE))

    return Return.ok(
        SignupCommand(name=name, username=username, email=email, password=password)
    )


class PublicProfile(BaseModel):
    """The only representation of a user returned to callers"""

    id: str
    name: str
    username: str
    email: str


class TokenPair(BaseModel):
    """Bearer tokens issued on signup, delivered as cookies only"""

    access_token: str
    refresh_token: str


class SignupResult(BaseModel):
    profile: PublicProfile
    tokens: TokenPair
