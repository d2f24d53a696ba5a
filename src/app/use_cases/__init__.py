"""
Use Cases

Organized into domain folders:
- auth/: Authentication flows
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResult,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "SignupResult",
]
