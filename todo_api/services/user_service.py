import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.errors import Conflict, NotFound
from todo_api.models.user import User
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.repositories.user_repo import UserRepository
from todo_api.schemas.user import UserCreate
from todo_api.validation import clean_user

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "A user with this email already exists"


class UserService:
    def __init__(self):
        self.repo = UserRepository()
        self.todo_repo = TodoRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate) -> User:
        fields = clean_user(user_in.model_dump())
        # advisory only; the unique index on email is what settles a race
        if await self.repo.exists(db, email=fields.email):
            logger.warning("Rejected duplicate user email %s", fields.email)
            raise Conflict("email", DUPLICATE_EMAIL)

        user = User(name=fields.name, email=fields.email)
        try:
            await self.repo.create(db, user)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning("Unique index rejected user email %s", fields.email)
            raise Conflict("email", DUPLICATE_EMAIL)
        await db.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    async def list_users(self, db: AsyncSession) -> list[User]:
        return await self.repo.list(db, order_by=(User.id,))

    async def get_user(self, db: AsyncSession, user_id: int) -> User:
        user = await self.repo.get(db, user_id)
        if user is None:
            raise NotFound("user")
        return user

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """Delete a user together with every todo it owns."""
        user = await self.get_user(db, user_id)
        removed = await self.todo_repo.delete_where(db, user_id=user.id)
        await self.repo.delete(db, user.id)
        await db.commit()
        logger.info("Deleted user %s and %d todo(s)", user_id, removed)
