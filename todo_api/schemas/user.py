from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from todo_api.schemas.base import CamelModel, OrmOut, strip_required


class UserBase(CamelModel):
    name: str = Field(..., max_length=128)
    email: EmailStr

    @field_validator("name", mode="before")
    @classmethod
    def _name_not_blank(cls, value):
        return strip_required(value)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserCreate(UserBase):
    pass


class UserOut(OrmOut):
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
