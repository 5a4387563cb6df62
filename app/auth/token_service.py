"""JWT session token issuing and verification"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from pydantic import ValidationError

from app.accounts.models import Account
from app.auth.models import Claims

TOKEN_LIFETIME = timedelta(days=7)


class InvalidTokenError(Exception):
    """Token is malformed, tampered with or expired"""


class TokenService:
    """Signs and verifies session tokens with a process-wide secret"""

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = TOKEN_LIFETIME):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, account: Account, now: Optional[datetime] = None) -> str:
        """Create a signed token for an account"""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(account.id),
            "email": account.email,
            "role": account.role,
            "name": account.name,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Claims:
        """
        Verify token signature and expiry and decode the claims.

        Raises:
            InvalidTokenError: for every kind of failure, without detail
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return Claims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            raise InvalidTokenError() from e
