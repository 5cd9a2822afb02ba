# UI/errors.py
from typing import Optional, Sequence


class ApiError(Exception):
    """Base class for everything a panel can get back from a load or a create."""


class ValidationError(ApiError):
    """Required form fields are blank; nothing was sent."""

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class RequestError(ApiError):
    """The backend answered, but not with a success status (or not with JSON)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class NetworkError(ApiError):
    """The request never got an answer (refused, unreachable, timed out)."""
