"""Repository for User entity."""

from sqlalchemy import func
from sqlmodel import select

from src.taskboard.models import User
from src.taskboard.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User
    default_order = (User.id.asc(),)  # type: ignore[union-attr]

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email, ignoring case."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalars().first()
