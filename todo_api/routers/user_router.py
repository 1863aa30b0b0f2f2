from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db
from todo_api.routers.params import ResourceId
from todo_api.schemas.user import UserCreate, UserOut
from todo_api.services.user_service import UserService

router = APIRouter(tags=["Users"])
service = UserService()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_user(db, user_in)


@router.get("", response_model=list[UserOut])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await service.list_users(db)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: ResourceId, db: AsyncSession = Depends(get_db)):
    return await service.get_user(db, user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: ResourceId, db: AsyncSession = Depends(get_db)):
    await service.delete_user(db, user_id)
