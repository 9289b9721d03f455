"""User management service."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import ConflictError, NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import User
from src.taskboard.repositories import UserRepository
from src.taskboard.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User management service."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def _commit(self, user: User) -> None:
        email = user.email
        try:
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as e:
            # Fallback in case of race condition on the unique email
            await self.session.rollback()
            raise ConflictError(f"User with email '{email}' already exists") from e
        except Exception:
            await self.session.rollback()
            raise

    async def _ensure_email_free(self, email: str, user_id: int | None = None) -> None:
        existing = await self.user_repo.get_by_email(email)
        if existing is not None and existing.id != user_id:
            raise ConflictError(f"User with email '{email}' already exists")

    async def list_users(self) -> list[User]:
        return await self.user_repo.list_all()

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Create a user.

        Raises:
            ConflictError: If the email is already registered
        """
        await self._ensure_email_free(data.email)

        user = User(name=data.name, email=data.email)
        self.user_repo.add(user)
        await self._commit(user)

        logger.info("User created", user_id=user.id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Update user with provided data.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        user = await self.get_user(user_id)
        update_data = data.model_dump(exclude_unset=True)

        if "email" in update_data:
            await self._ensure_email_free(update_data["email"], user_id=user_id)

        for field, value in update_data.items():
            setattr(user, field, value)

        await self._commit(user)

        logger.info("User updated", user_id=user_id)
        return user

    async def delete_user(self, user_id: int) -> None:
        try:
            deleted = await self.user_repo.delete_by_id(user_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if not deleted:
            raise NotFoundError(f"User {user_id} not found")

        logger.info("User deleted", user_id=user_id)
