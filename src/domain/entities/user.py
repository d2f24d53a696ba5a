"""
User Entity

Represents a registered account.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_object_id


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email must be unique across all users
    - Username must be unique across all users
    - Password stored as bcrypt hash, never exposed outside the repository
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_object_id, primary_key=True, max_length=24)
    name: str = Field(max_length=255)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
