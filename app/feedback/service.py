"""Feedback service layer for business logic"""
import logging
from uuid import UUID
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth.models import Claims
from app.feedback.exceptions import FeedbackNotFoundException, InvalidRatingException
from app.feedback.models import MAX_RATING, MIN_RATING, Feedback
from app.feedback.repository import FeedbackRepository
from app.feedback.schemas import CreateFeedbackRequest

logger = logging.getLogger(__name__)


def validate_rating(rating) -> int:
    """Reject ratings outside [MIN_RATING, MAX_RATING]; values are never clamped"""
    if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRatingException(rating, MIN_RATING, MAX_RATING)
    return rating


class FeedbackService:
    """Service layer for feedback business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = FeedbackRepository(db)

    async def create_feedback(self, owner: Claims, answers: CreateFeedbackRequest) -> Feedback:
        """
        Store a submission for the authenticated caller.

        Business rules:
        - Owner id, name and email are taken from the verified claims only
        - Rating must be between 1 and 10 inclusive
        """
        feedback = Feedback(
            user_id=owner.account_id,
            user_name=owner.name,
            user_email=owner.email,
            what_do_you_think=answers.what_do_you_think,
            kind_of_person=answers.kind_of_person,
            positive_things=answers.positive_things,
            negative_things=answers.negative_things,
            nature=answers.nature,
            advice_for_me=answers.advice_for_me,
            memory_with_me=answers.memory_with_me,
            rate_our_friendship=validate_rating(answers.rate_our_friendship),
            additional_message=answers.additional_message or "",
        )

        feedback = await self.repository.create(feedback)
        logger.info(f"Feedback {feedback.id} submitted by {owner.email}")
        return feedback

    async def get_feedback_by_id(self, feedback_id: UUID) -> Feedback:
        feedback = await self.repository.get_by_id(feedback_id)
        if not feedback:
            raise FeedbackNotFoundException(feedback_id)

        return feedback

    async def list_for_user(self, user_id: UUID) -> List[Feedback]:
        return await self.repository.list_feedbacks(user_id=user_id)

    async def list_all(self) -> List[Feedback]:
        return await self.repository.list_feedbacks()

    async def delete_feedback(self, feedback: Feedback, deleted_by: Claims) -> None:
        await self.repository.delete(feedback)
        logger.info(f"Feedback {feedback.id} deleted by {deleted_by.email}")
