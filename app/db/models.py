"""All ORM models, imported together so metadata is complete"""
from app.db.base import Base
from app.accounts.models import Account, Role
from app.feedback.models import Feedback

__all__ = ["Base", "Account", "Role", "Feedback"]
