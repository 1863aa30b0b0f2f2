from datetime import datetime
from typing import Optional

from pydantic import Field, StrictBool, field_validator

from todo_api.schemas.base import CamelModel, OrmOut, strip_required


class TodoBase(CamelModel):
    name: str = Field(..., max_length=128)
    category: str = Field(..., max_length=64)
    done: StrictBool = False

    @field_validator("name", "category", mode="before")
    @classmethod
    def _not_blank(cls, value):
        return strip_required(value)


class TodoCreate(TodoBase):
    pass


class TodoUpdate(CamelModel):
    """Partial update; fields left out of the payload keep their value."""

    name: Optional[str] = None
    category: Optional[str] = None
    done: Optional[StrictBool] = None


class TodoOut(OrmOut):
    id: int
    user_id: int
    name: str
    done: bool
    category: str
    created_at: datetime
    updated_at: datetime
