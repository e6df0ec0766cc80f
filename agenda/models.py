# agenda/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from .database import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(Base):
    __tablename__ = "contatos"

    id = Column(String(32), primary_key=True, index=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    surname = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    # Set on the Python side so ordering keeps sub-second resolution
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    def __repr__(self):
        return f"<Contact id={self.id!r} name={self.name!r}>"
