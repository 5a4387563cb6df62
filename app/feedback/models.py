"""Feedback database model"""
from uuid import uuid4
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow

MIN_RATING = 1
MAX_RATING = 10


class Feedback(Base):
    """
    Questionnaire answers submitted by an account.

    user_name and user_email are a snapshot of the owner taken at submission
    time and are not updated when the account changes.
    """
    __tablename__ = "feedbacks"
    __table_args__ = (
        CheckConstraint(
            f"rate_our_friendship BETWEEN {MIN_RATING} AND {MAX_RATING}",
            name="ck_feedbacks_rating_range",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey("accounts.id"), nullable=False, index=True)
    user_name = Column(String(255), nullable=False)
    user_email = Column(String(255), nullable=False)
    what_do_you_think = Column(Text, nullable=False)
    kind_of_person = Column(Text, nullable=False)
    positive_things = Column(Text, nullable=False)
    negative_things = Column(Text, nullable=False)
    nature = Column(Text, nullable=False)
    advice_for_me = Column(Text, nullable=False)
    memory_with_me = Column(Text, nullable=False)
    rate_our_friendship = Column(Integer, nullable=False)
    additional_message = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
