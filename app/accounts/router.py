"""Registration, login and current-account endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.accounts.schemas import AccountResponse, AuthResponse, LoginRequest, MeResponse, RegisterRequest
from app.accounts.service import AccountService
from app.auth.middleware import get_token_service, verify_token
from app.auth.models import Claims
from app.auth.token_service import TokenService
from app.config import Settings, get_settings
from app.db.database import get_db

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Register a member account and sign it in.

    Always creates role "user"; a role in the body is ignored.
    """
    service = AccountService(db, settings.bcrypt_rounds)
    account = await service.register(
        name=request.name,
        email=request.email,
        password=request.password,
    )

    return AuthResponse(
        message="User registered successfully",
        token=token_service.issue(account),
        account=AccountResponse.model_validate(account),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    token_service: TokenService = Depends(get_token_service),
):
    service = AccountService(db, settings.bcrypt_rounds)
    account = await service.authenticate(request.email, request.password)

    return AuthResponse(
        message="Login successful",
        token=token_service.issue(account),
        account=AccountResponse.model_validate(account),
    )


@router.get("/me", response_model=MeResponse)
async def me(
    db: AsyncSession = Depends(get_db),
    claims: Claims = Depends(verify_token),
):
    """Current account, loaded fresh from the database"""
    service = AccountService(db)
    account = await service.get_account(claims.account_id)
    return MeResponse(account=AccountResponse.model_validate(account))
