from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import is_unique_violation
from src.app.repositories.errors import DuplicateKeyError
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_one(
        self, email: Optional[str] = None, username: Optional[str] = None
    ) -> Optional[User]:
        """Get user by email or username"""
        conditions = []
        if email is not None:
            conditions.append(User.email == email)
        if username is not None:
            conditions.append(User.username == username)
        if not conditions:
            return None

        stmt = select(User).where(or_(*conditions)).limit(1)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError(str(exc.orig)) from exc
            raise
        await self.session.refresh(user)
        return user
