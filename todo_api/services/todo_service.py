import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.errors import NotFound
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.repositories.user_repo import UserRepository
from todo_api.schemas.todo import TodoCreate, TodoUpdate
from todo_api.validation import clean_todo, parse_done_filter

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "done", "category")


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()
        self.user_repo = UserRepository()

    async def require_user(self, db: AsyncSession, user_id: int) -> User:
        user = await self.user_repo.get(db, user_id)
        if user is None:
            raise NotFound("user")
        return user

    async def get_owned_todo(self, db: AsyncSession, user_id: int, todo_id: int) -> Todo:
        """Resolve a todo through its owner.

        A todo that exists but belongs to another user is reported exactly
        like a missing one.
        """
        await self.require_user(db, user_id)
        todo = await self.repo.get(db, todo_id)
        if todo is None or todo.user_id != user_id:
            raise NotFound("todo")
        return todo

    async def create_todo(self, db: AsyncSession, user_id: int, todo_in: TodoCreate) -> Todo:
        await self.require_user(db, user_id)
        fields = clean_todo(todo_in.model_dump())
        todo = Todo(user_id=user_id, name=fields.name, category=fields.category, done=fields.done)
        try:
            await self.repo.create(db, todo)
            await db.commit()
        except IntegrityError:
            # the owner vanished between the existence check and the insert
            await db.rollback()
            logger.warning("Foreign key rejected todo for user %s", user_id)
            raise NotFound("user")
        await db.refresh(todo)
        logger.info("Created todo %s for user %s", todo.id, user_id)
        return todo

    async def list_todos(
        self,
        db: AsyncSession,
        user_id: int,
        done: str | None = None,
        category: str | None = None,
    ) -> list[Todo]:
        await self.require_user(db, user_id)
        return await self.repo.list_for_user(
            db, user_id, done=parse_done_filter(done), category=category
        )

    async def get_todo(self, db: AsyncSession, user_id: int, todo_id: int) -> Todo:
        return await self.get_owned_todo(db, user_id, todo_id)

    async def update_todo(
        self, db: AsyncSession, user_id: int, todo_id: int, todo_in: TodoUpdate
    ) -> Todo:
        todo = await self.get_owned_todo(db, user_id, todo_id)
        changes = todo_in.model_dump(include=set(MUTABLE_FIELDS), exclude_unset=True)
        merged = {field: getattr(todo, field) for field in MUTABLE_FIELDS}
        merged.update(changes)
        cleaned = clean_todo(merged)
        for field in changes:
            setattr(todo, field, getattr(cleaned, field))
        await db.commit()
        await db.refresh(todo)
        return todo

    async def delete_todo(self, db: AsyncSession, user_id: int, todo_id: int) -> None:
        todo = await self.get_owned_todo(db, user_id, todo_id)
        await self.repo.delete(db, todo.id)
        await db.commit()
        logger.info("Deleted todo %s of user %s", todo_id, user_id)
