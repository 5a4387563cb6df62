"""Account Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List
from pydantic import Field, field_validator
from app.schemas import CamelModel
from app.utils.timezone import as_utc


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)

    @field_validator("name", "email", mode="before")
    @classmethod
    def _strip(cls, value):
        # passwords are left untouched
        return value.strip() if isinstance(value, str) else value


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AccountResponse(CamelModel):
    """Public account projection, never includes the password hash"""
    id: UUID
    name: str
    email: str
    role: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class AuthResponse(CamelModel):
    message: str
    token: str
    account: AccountResponse


class MeResponse(CamelModel):
    account: AccountResponse


class AccountListResponse(CamelModel):
    count: int
    accounts: List[AccountResponse]
