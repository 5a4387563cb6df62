"""Account service layer: registration, login and lookups"""
import logging
from uuid import UUID
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from app.accounts.exceptions import (
    AccountNotFoundException,
    DuplicateEmailException,
    InvalidCredentialsException,
    WeakPasswordException,
)
from app.accounts.models import Account, Role
from app.accounts.repository import AccountRepository
from app.auth.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AccountService:
    """Service layer for account business logic"""

    def __init__(self, db: AsyncSession, bcrypt_rounds: int = 12):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.repository = AccountRepository(db)

    async def register(self, name: str, email: str, password: str, role: Role = Role.USER) -> Account:
        """
        Create an account.

        Business rules:
        - Email is unique, compared case-insensitively
        - Password has at least MIN_PASSWORD_LENGTH characters
        - Only the password hash is stored
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordException(MIN_PASSWORD_LENGTH)

        if await self.repository.get_by_email(email):
            raise DuplicateEmailException()

        # bcrypt is deliberately slow; keep it off the event loop
        password_hash = await run_in_threadpool(hash_password, password, self.bcrypt_rounds)

        account = await self.repository.create(Account(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role.value,
        ))
        logger.info(f"Account registered: {account.email} ({account.role})")
        return account

    async def authenticate(self, email: str, password: str) -> Account:
        """Return the account for valid credentials, otherwise raise InvalidCredentialsException"""
        account = await self.repository.get_by_email(email)
        if account is None:
            logger.info(f"Login failed for unknown email: {email}")
            raise InvalidCredentialsException()

        matches = await run_in_threadpool(verify_password, password, account.password_hash)
        if not matches:
            logger.info(f"Login failed for {account.email}")
            raise InvalidCredentialsException()

        return account

    async def get_account(self, account_id: UUID) -> Account:
        account = await self.repository.get_by_id(account_id)
        if not account:
            raise AccountNotFoundException(account_id)
        return account

    async def list_accounts(self) -> List[Account]:
        return await self.repository.list_accounts()

    async def count_members(self) -> int:
        return await self.repository.count_by_role(Role.USER)
