"""Shared repository base helpers."""
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Base repository with common DB helpers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, instance):
        """Persist a new or changed instance and reload server-side values."""
        self.db.add(instance)
        await self.db.commit()
        await self.db.refresh(instance)
        return instance

    async def _remove(self, instance) -> None:
        await self.db.delete(instance)
        await self.db.commit()
