from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute

T = TypeVar("T")  # declarative model class


class BaseRepository(Generic[T]):
    """
    Shared async repository for a single declarative model.
    - Accepts model instances only, never dicts or pydantic objects.
    - Never commits; the calling service owns commit/rollback.
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        return await session.get(self.model, pk)

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        """Equality filters only."""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one()) > 0

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
    ) -> list[T]:
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new instance.
        - transient (not yet in a session): add -> flush, so the PK is assigned
        - anything else is rejected; updates go through the loaded instance
        """
        if not sa_inspect(obj).transient:
            raise ValueError("create(): expected a transient (new) model instance")
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, pk: Any) -> bool:
        """Delete by primary key; True if a row was removed."""
        pk_cols = sa_inspect(self.model).primary_key
        if len(pk_cols) != 1:
            raise ValueError("delete(): composite primary key is not supported")
        stmt = sa_delete(self.model).where(pk_cols[0] == pk)
        res = await session.execute(stmt)
        return (res.rowcount or 0) > 0

    async def delete_where(self, session: AsyncSession, **filters: Any) -> int:
        if not filters:
            raise ValueError("delete_where(): refusing to delete without filters")
        stmt = sa_delete(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return res.rowcount or 0
