"""Account custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class DuplicateEmailException(HTTPException):
    """Raised when registering an email that already has an account"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists with this email"
        )


class WeakPasswordException(HTTPException):
    def __init__(self, min_length: int):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {min_length} characters"
        )


class InvalidCredentialsException(HTTPException):
    """Raised for an unknown email or a wrong password alike"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )


class AccountNotFoundException(HTTPException):
    def __init__(self, account_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {account_id} not found"
        )
