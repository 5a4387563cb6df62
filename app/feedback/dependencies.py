"""Record-level access dependencies for feedback endpoints"""
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.middleware import enforce, verify_token
from app.auth.models import Claims
from app.auth.permissions_manager import PermissionsManager, get_permissions_manager
from app.auth.policies import AccessRule
from app.db.database import get_db
from app.feedback.models import Feedback
from app.feedback.service import FeedbackService


def authorized_feedback(rule: AccessRule):
    """
    Dependency factory for the ownership gate.

    The record is loaded first so a missing id is 404 for every caller,
    then the rule is evaluated against the persisted owner.
    """

    async def dependency(
        feedback_id: UUID,
        db: AsyncSession = Depends(get_db),
        claims: Claims = Depends(verify_token),
        permissions: PermissionsManager = Depends(get_permissions_manager),
    ) -> Feedback:
        feedback = await FeedbackService(db).get_feedback_by_id(feedback_id)
        enforce(rule, claims, permissions, record=feedback)
        return feedback

    return dependency
