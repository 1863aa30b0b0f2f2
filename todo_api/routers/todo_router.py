from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.routers.params import ResourceId
from todo_api.schemas.todo import TodoCreate, TodoOut, TodoUpdate
from todo_api.services.todo_service import TodoService

router = APIRouter(tags=["Todos"])
service = TodoService()


# dependencies run before the body is validated, so an unknown owner or a
# todo outside the owner's scope is reported as 404 whatever the payload is
async def owner(user_id: ResourceId, db: AsyncSession = Depends(get_db)) -> User:
    return await service.require_user(db, user_id)


async def owned_todo(
    user_id: ResourceId, todo_id: ResourceId, db: AsyncSession = Depends(get_db)
) -> Todo:
    return await service.get_owned_todo(db, user_id, todo_id)


@router.post("/{user_id}/todos", response_model=TodoOut, status_code=status.HTTP_201_CREATED)
async def create_todo(
    user_id: ResourceId,
    todo_in: TodoCreate,
    _: User = Depends(owner),
    db: AsyncSession = Depends(get_db),
):
    return await service.create_todo(db, user_id, todo_in)


@router.get("/{user_id}/todos", response_model=list[TodoOut])
async def list_todos(
    user_id: ResourceId,
    done: Optional[str] = Query(None, description="'true' or 'false'"),
    category: Optional[str] = Query(None),
    _: User = Depends(owner),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_todos(db, user_id, done=done, category=category)


@router.get("/{user_id}/todos/{todo_id}", response_model=TodoOut)
async def get_todo(user_id: ResourceId, todo_id: ResourceId, db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, user_id, todo_id)


@router.put("/{user_id}/todos/{todo_id}", response_model=TodoOut)
async def update_todo(
    user_id: ResourceId,
    todo_id: ResourceId,
    todo_in: TodoUpdate,
    _: Todo = Depends(owned_todo),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_todo(db, user_id, todo_id, todo_in)


@router.delete("/{user_id}/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(user_id: ResourceId, todo_id: ResourceId, db: AsyncSession = Depends(get_db)):
    await service.delete_todo(db, user_id, todo_id)
