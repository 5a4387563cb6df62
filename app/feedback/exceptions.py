"""Feedback custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class FeedbackNotFoundException(HTTPException):
    """Raised when feedback is not found"""
    def __init__(self, feedback_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback with id {feedback_id} not found"
        )


class InvalidRatingException(HTTPException):
    """Raised when a friendship rating falls outside the allowed range"""
    def __init__(self, rating, minimum: int, maximum: int):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Rating must be between {minimum} and {maximum}, got {rating}"
        )
