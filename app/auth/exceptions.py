"""Authentication and authorization exceptions"""
from fastapi import HTTPException, status


class UnauthenticatedException(HTTPException):
    """Raised when a request carries no bearer token"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidTokenException(HTTPException):
    """Raised for a bad signature, malformed token or expired token alike"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )


class ForbiddenException(HTTPException):
    """Raised when the caller's role or ownership does not allow the action"""
    def __init__(self, detail: str = "Access denied"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
