"""
Application error taxonomy.

Services raise these; the handlers registered in ``socialapp.main`` turn
them into JSON responses of the form ``{"message": ...}``.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class AuthError(AppError):
    """Missing or invalid credentials or token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class ConflictError(AppError):
    """Uniqueness violation (email or username already taken)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"


class NotFoundError(AppError):
    """Requested entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(AppError):
    """Unexpected persistence failure; message never carries details."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
