from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, false

from todo_api.database import Base
from todo_api.models.mixins import TimestampMixin


class Todo(TimestampMixin, Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
    category = Column(String(64), nullable=False, index=True)
