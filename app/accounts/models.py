"""Account database model"""
from enum import Enum
from uuid import uuid4
from sqlalchemy import Column, DateTime, String, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow


class Role(str, Enum):
    """Account roles"""
    USER = "user"
    ADMIN = "admin"


class Account(Base):
    """Registered account. Email is stored lower-cased."""
    __tablename__ = "accounts"

    id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=Role.USER.value)
    created_at = Column(DateTime, default=utcnow, nullable=False)
