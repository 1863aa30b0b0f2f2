"""Explicit per-entity validation returning field-level errors.

Request bodies are already shaped by FastAPI; services run these rules once
more on the exact data they are about to persist, e.g. a todo after a
partial update has been merged into it.
"""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from todo_api.errors import ValidationError, field_errors
from todo_api.schemas.todo import TodoBase
from todo_api.schemas.user import UserBase


def _errors(schema: type[BaseModel], data: dict) -> list[dict]:
    try:
        schema.model_validate(data)
    except PydanticValidationError as exc:
        return field_errors(exc.errors())
    return []


def validate_user(data: dict) -> list[dict]:
    return _errors(UserBase, data)


def validate_todo(data: dict) -> list[dict]:
    return _errors(TodoBase, data)


def clean_user(data: dict) -> UserBase:
    """Return the normalized user fields or raise ValidationError."""
    errors = validate_user(data)
    if errors:
        raise ValidationError("Invalid user", errors)
    return UserBase.model_validate(data)


def clean_todo(data: dict) -> TodoBase:
    """Return the normalized todo fields or raise ValidationError."""
    errors = validate_todo(data)
    if errors:
        raise ValidationError("Invalid todo", errors)
    return TodoBase.model_validate(data)


def parse_done_filter(raw: str | None) -> bool | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError(
        "Invalid filter value",
        [{"field": "done", "message": "must be 'true' or 'false'"}],
    )
