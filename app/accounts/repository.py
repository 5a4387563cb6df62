"""Account repository for database operations"""
from uuid import UUID
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from app.accounts.exceptions import DuplicateEmailException
from app.accounts.models import Account, Role
from app.db.repository import BaseRepository


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AccountRepository(BaseRepository):
    """Repository for account database operations"""

    async def create(self, account: Account) -> Account:
        """Insert a new account; the unique email index is the final arbiter"""
        account.email = normalize_email(account.email)
        try:
            return await self._save(account)
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmailException()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        stmt = select(Account).where(Account.id == account_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Case-insensitive lookup by email"""
        stmt = select(Account).where(Account.email == normalize_email(email))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_accounts(self) -> List[Account]:
        """All accounts, newest first"""
        stmt = select(Account).order_by(Account.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_by_role(self, role: Role) -> int:
        stmt = select(func.count()).select_from(Account).where(Account.role == role.value)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
