"""Admin REST API endpoints"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.accounts.schemas import AccountListResponse, AccountResponse
from app.accounts.service import AccountService
from app.admin.schemas import StatsResponse
from app.admin.service import AdminService
from app.auth.middleware import require
from app.auth.models import Claims
from app.auth.policies import CAN_LIST_ACCOUNTS, CAN_VIEW_STATS
from app.db.database import get_db

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
)


@router.get("/users", response_model=AccountListResponse)
async def list_users(
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(require(CAN_LIST_ACCOUNTS)),
):
    """All accounts, newest first, without password hashes."""
    accounts = await AccountService(db).list_accounts()
    return AccountListResponse(
        count=len(accounts),
        accounts=[AccountResponse.model_validate(account) for account in accounts],
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(require(CAN_VIEW_STATS)),
):
    return await AdminService(db).get_stats()
