"""
Domain exceptions - raised by repositories and services, mapped to HTTP in endpoints.
Challenge: Keep HTTP concerns out of data access while giving handlers a clear status code.
"""

from fastapi import status


class AppError(Exception):
    """Base for all domain errors. Surfaced as 400 unless a subclass says otherwise."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = ""):
        self.message = message or self.__class__.__doc__ or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(AppError):
    """Requested entity does not exist."""


class UserNotFoundError(NotFoundError):
    """User not found."""


class RoleNotFoundError(NotFoundError):
    """Role not found."""


class AuthenticationError(AppError):
    """Authentication failed."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(AuthenticationError):
    """Invalid email or password."""


class InvalidTokenError(AuthenticationError):
    """Invalid or expired token."""
