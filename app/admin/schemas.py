"""Admin Pydantic schemas"""
from app.schemas import CamelModel


class StatsResponse(CamelModel):
    """Totals for the admin dashboard"""
    total_users: int
    total_feedbacks: int
    average_rating: float
