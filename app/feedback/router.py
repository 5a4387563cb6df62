"""Feedback REST API endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth.middleware import require, verify_token
from app.auth.models import Claims
from app.auth.policies import (
    CAN_DELETE_FEEDBACK,
    CAN_LIST_ALL_FEEDBACK,
    CAN_LIST_OWN_FEEDBACK,
    CAN_READ_FEEDBACK,
    CAN_SUBMIT_FEEDBACK,
)
from app.db.database import get_db
from app.feedback.dependencies import authorized_feedback
from app.feedback.models import Feedback
from app.feedback.schemas import (
    CreateFeedbackRequest,
    FeedbackCreatedResponse,
    FeedbackDetailResponse,
    FeedbackListResponse,
    FeedbackResponse,
    MessageResponse,
)
from app.feedback.service import FeedbackService


router = APIRouter(
    prefix="/api/feedback",
    tags=["feedback"],
)


def to_list_response(feedbacks) -> FeedbackListResponse:
    return FeedbackListResponse(
        count=len(feedbacks),
        records=[FeedbackResponse.model_validate(feedback) for feedback in feedbacks],
    )


@router.post("", response_model=FeedbackCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    request: CreateFeedbackRequest,
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(require(CAN_SUBMIT_FEEDBACK)),
):
    """
    Submit questionnaire answers.

    The submission is owned by the caller identified by the token.
    """
    service = FeedbackService(db)
    feedback = await service.create_feedback(claims, request)

    return FeedbackCreatedResponse(
        message="Thank you for your feedback!",
        record=FeedbackResponse.model_validate(feedback),
    )


@router.get("/my", response_model=FeedbackListResponse)
async def list_my_feedbacks(
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(require(CAN_LIST_OWN_FEEDBACK)),
):
    service = FeedbackService(db)
    return to_list_response(await service.list_for_user(claims.account_id))


@router.get("/all", response_model=FeedbackListResponse)
async def list_all_feedbacks(
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(require(CAN_LIST_ALL_FEEDBACK)),
):
    """List every submission (Admins only)."""
    service = FeedbackService(db)
    return to_list_response(await service.list_all())


@router.get("/{feedback_id}", response_model=FeedbackDetailResponse)
async def get_feedback(
    feedback: Feedback = Depends(authorized_feedback(CAN_READ_FEEDBACK)),
):
    return FeedbackDetailResponse(record=FeedbackResponse.model_validate(feedback))


@router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(
    db: AsyncSession = Depends(get_db),
    feedback: Feedback = Depends(authorized_feedback(CAN_DELETE_FEEDBACK)),
    claims: Claims = Depends(verify_token),
):
    """Delete a submission (owner or admin)."""
    service = FeedbackService(db)
    await service.delete_feedback(feedback, deleted_by=claims)
    return MessageResponse(message="Feedback deleted successfully")
