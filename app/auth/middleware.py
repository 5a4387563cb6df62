"""Authentication Middleware"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.exceptions import ForbiddenException, InvalidTokenException, UnauthenticatedException
from app.auth.models import Claims
from app.auth.permissions_manager import PermissionsManager, get_permissions_manager
from app.auth.policies import AccessRule, OwnedRecord
from app.auth.token_service import InvalidTokenError, TokenService
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """Token service bound to the configured signing secret"""
    return TokenService(secret=settings.jwt_secret, algorithm=settings.jwt_algorithm)


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> Claims:
    """
    Resolve the caller from the bearer token.

    The returned claims are the only source of caller identity; nothing in
    the request body is trusted for it.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedException()

    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenError:
        raise InvalidTokenException()


def enforce(
    rule: AccessRule,
    claims: Claims,
    permissions: PermissionsManager,
    record: Optional[OwnedRecord] = None,
) -> None:
    """
    Raise ForbiddenException unless the rule allows the caller.

    Args:
        rule: Access rule for the endpoint
        claims: Verified caller claims
        permissions: Role-to-permission mapping
        record: Target record for ownership rules
    """
    if not rule.allows(claims, permissions, record):
        logger.warning(f"Access denied: account={claims.account_id} role={claims.role.value} rule={rule!r}")
        raise ForbiddenException(rule.description)


def require(rule: AccessRule):
    """Dependency factory: authenticate, then check a role-level rule"""

    async def dependency(
        claims: Claims = Depends(verify_token),
        permissions: PermissionsManager = Depends(get_permissions_manager),
    ) -> Claims:
        enforce(rule, claims, permissions)
        return claims

    return dependency
