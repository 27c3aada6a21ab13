# workout_tracker/errors.py
"""
Exception hierarchy shared by the services and the HTTP layer.

Services raise these; the application factory turns them into
``{"error": message}`` responses with ``status_code``.
"""
from typing import Any, Dict


class FitnessAPIError(Exception):
    """Base class for every error the API reports to its callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(FitnessAPIError):
    """Malformed, missing or out-of-range input."""

    status_code = 400
    default_message = "Invalid data"


class ConflictError(FitnessAPIError):
    """Uniqueness violation (username / email already taken).

    Reported as 400: the front end treats duplicates and invalid data alike.
    """

    status_code = 400
    default_message = "User already exists or invalid data"


class AuthError(FitnessAPIError):
    # never say whether the email or the password was wrong
    status_code = 401
    default_message = "Invalid credentials"


class ForbiddenError(FitnessAPIError):
    status_code = 403
    default_message = "Not allowed to access this resource"


class NotFoundError(FitnessAPIError):
    status_code = 404
    default_message = "Not found"


class StoreError(FitnessAPIError):
    """The database rejected or aborted a unit of work."""

    status_code = 500
    default_message = "Database error"
