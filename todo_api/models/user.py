from sqlalchemy import Column, Integer, String

from todo_api.database import Base
from todo_api.models.mixins import TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(254), nullable=False, unique=True, index=True)
