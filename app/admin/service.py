"""Admin service: dashboard statistics"""
from sqlalchemy.ext.asyncio import AsyncSession
from app.accounts.service import AccountService
from app.admin.schemas import StatsResponse
from app.feedback.repository import FeedbackRepository


class AdminService:
    """Read-only aggregates over accounts and feedbacks"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.accounts = AccountService(db)
        self.feedbacks = FeedbackRepository(db)

    async def get_stats(self) -> StatsResponse:
        """
        Dashboard totals.

        total_users counts member accounts only; average_rating is rounded
        to one decimal and 0 when nothing has been submitted.
        """
        avg_rating = await self.feedbacks.average_rating()
        return StatsResponse(
            total_users=await self.accounts.count_members(),
            total_feedbacks=await self.feedbacks.count(),
            average_rating=round(avg_rating, 1) if avg_rating is not None else 0.0,
        )
