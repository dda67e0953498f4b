"""
Service-level error taxonomy.

Each error carries the HTTP status and the fixed user-facing message it
maps to. The application installs a single handler that renders them as
``{"message": message}``.
"""
from typing import Optional

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentityError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid user"


class AlreadyFollowingError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already following this user"


class InvalidCredentialsError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class UserNotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class OperationFailedError(ServiceError):
    """Unexpected store or infrastructure failure inside an operation."""
