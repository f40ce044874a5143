# services/errors.py
from typing import Dict, Optional


class ApiError(Exception):
    """Base class for failures raised by the mock service and the dashboard."""
    status_code = 500


class ValidationError(ApiError):
    status_code = 422

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class NetworkError(ApiError):
    status_code = 503


class ServerError(ApiError):
    status_code = 500


class StudentNotFoundError(ApiError):
    status_code = 404


class InvalidTransitionError(ApiError):
    """Raised when a dashboard action is not allowed in the current status."""
    status_code = 409
