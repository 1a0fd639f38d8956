"""
Domain-level exceptions.

Raised by the pure domain layer (entities and the 1RM estimation library)
when an input violates a documented precondition. The application layer
catches these and reports them through use-case results.
"""
from typing import List, Optional


class ValidationError(ValueError):
    """Input violates a documented precondition.

    Subclasses ValueError so pydantic field validators surface it as a
    regular validation failure.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]
