"""Startup routine: schema creation and administrator seeding"""
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.accounts.exceptions import DuplicateEmailException
from app.accounts.models import Role
from app.accounts.service import AccountService
from app.config import Settings
from app.db.database import connect_with_retry, create_schema

logger = logging.getLogger(__name__)


async def seed_admin(session_factory: async_sessionmaker[AsyncSession], settings: Settings) -> bool:
    """
    Ensure the configured administrator account exists.

    Returns:
        True if the account was created, False if it already existed
    """
    async with session_factory() as session:
        service = AccountService(session, settings.bcrypt_rounds)
        if await service.repository.get_by_email(settings.admin_email):
            logger.info(f"Admin account already exists: {settings.admin_email}")
            return False

        try:
            await service.register(
                name=settings.admin_name,
                email=settings.admin_email,
                password=settings.admin_password,
                role=Role.ADMIN,
            )
        except DuplicateEmailException:
            # another process seeded between the lookup and the insert
            logger.info(f"Admin account created concurrently: {settings.admin_email}")
            return False
        logger.info(f"Admin account created: {settings.admin_email}")
        return True


async def bootstrap(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> None:
    """Connect, create tables, seed the administrator"""
    await connect_with_retry(engine, settings.db_connect_retry_delay)
    await create_schema(engine)
    await seed_admin(session_factory, settings)
