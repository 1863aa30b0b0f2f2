from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.models.todo import Todo
from todo_api.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: int,
        *,
        done: bool | None = None,
        category: str | None = None,
    ) -> list[Todo]:
        where = {"user_id": user_id}
        if done is not None:
            where["done"] = done
        if category is not None:
            where["category"] = category
        return await self.list(db, where=where, order_by=(Todo.id,))
