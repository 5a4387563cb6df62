"""Feedback Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List
from pydantic import ConfigDict, Field, field_validator
from app.feedback.models import MAX_RATING, MIN_RATING
from app.schemas import CamelModel
from app.utils.timezone import as_utc


class CreateFeedbackRequest(CamelModel):
    """
    Questionnaire answers.

    Owner fields are not part of the request; they come from the token.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    what_do_you_think: str = Field(..., min_length=1)
    kind_of_person: str = Field(..., min_length=1)
    positive_things: str = Field(..., min_length=1)
    negative_things: str = Field(..., min_length=1)
    nature: str = Field(..., min_length=1)
    advice_for_me: str = Field(..., min_length=1)
    memory_with_me: str = Field(..., min_length=1)
    rate_our_friendship: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Friendship rating 1-10")
    additional_message: str = ""


class FeedbackResponse(CamelModel):
    """Feedback response"""
    id: UUID
    user_id: UUID
    user_name: str
    user_email: str
    what_do_you_think: str
    kind_of_person: str
    positive_things: str
    negative_things: str
    nature: str
    advice_for_me: str
    memory_with_me: str
    rate_our_friendship: int
    additional_message: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class FeedbackCreatedResponse(CamelModel):
    message: str
    record: FeedbackResponse


class FeedbackDetailResponse(CamelModel):
    record: FeedbackResponse


class FeedbackListResponse(CamelModel):
    """List of feedbacks, newest first"""
    count: int
    records: List[FeedbackResponse]


class MessageResponse(CamelModel):
    message: str
