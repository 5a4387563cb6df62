"""JWT Payload Models"""
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from app.accounts.models import Role


class Claims(BaseModel):
    """Verified token payload identifying the caller"""
    model_config = ConfigDict(populate_by_name=True)

    account_id: UUID = Field(..., alias="sub")
    email: str
    role: Role
    name: str
    iat: datetime
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
