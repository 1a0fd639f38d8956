"""
Application-layer exceptions.

These exceptions are used across application, infrastructure and API layers.
Use cases report failures through their Result objects; ``raise_for_error``
on a Result turns a failure back into one of these.
"""
from typing import Any, Dict, List, Optional


class ApplicationError(Exception):
    """Base error for failed application operations."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(ApplicationError):
    """Raised when a max log does not exist for the profile."""

    pass


class ApplicationValidationError(ApplicationError):
    """Raised when input is rejected by domain validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message, {"errors": errors or []})
        self.errors = errors or []
