"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import (
    ALL_FIELDS_REQUIRED_MESSAGE,
    USER_ALREADY_EXISTS,
    USER_ALREADY_EXISTS_MESSAGE,
    VALIDATION_ERROR,
    PublicProfile,
    SignupCommand,
    SignupResult,
    TokenPair,
    validate_signup_fields,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    # Validation
    "validate_signup_fields",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResult",
    "PublicProfile",
    "TokenPair",
    # Error codes and messages
    "VALIDATION_ERROR",
    "USER_ALREADY_EXISTS",
    "ALL_FIELDS_REQUIRED_MESSAGE",
    "USER_ALREADY_EXISTS_MESSAGE",
]
