"""Feedback repository for database operations"""
from uuid import UUID
from typing import Optional, List
from sqlalchemy import select, func
from app.db.repository import BaseRepository
from app.feedback.models import Feedback


class FeedbackRepository(BaseRepository):
    """Repository for feedback database operations"""

    async def create(self, feedback: Feedback) -> Feedback:
        """Create new feedback"""
        return await self._save(feedback)

    async def get_by_id(self, feedback_id: UUID) -> Optional[Feedback]:
        """Get feedback by ID"""
        stmt = select(Feedback).where(Feedback.id == feedback_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_feedbacks(self, user_id: Optional[UUID] = None) -> List[Feedback]:
        """
        List feedbacks newest first.

        Args:
            user_id: Only feedbacks submitted by this account (optional)
        """
        stmt = select(Feedback)
        if user_id is not None:
            stmt = stmt.where(Feedback.user_id == user_id)
        stmt = stmt.order_by(Feedback.created_at.desc())

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, feedback: Feedback) -> None:
        """Delete feedback"""
        await self._remove(feedback)

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Feedback))
        return result.scalar() or 0

    async def average_rating(self) -> Optional[float]:
        """Mean friendship rating over all feedbacks, None when there are none"""
        result = await self.db.execute(select(func.avg(Feedback.rate_our_friendship)))
        avg_rating = result.scalar()
        return float(avg_rating) if avg_rating is not None else None
