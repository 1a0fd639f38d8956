"""
Shared Result base for max-log use cases.

Use cases never raise: they log the failure and return a Result with
``success=False``. Callers that prefer exceptions call ``raise_for_error``.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import (
    ApplicationError,
    ApplicationValidationError,
    NotFoundError,
)


@dataclass
class UseCaseResult:
    """Outcome of a use case execution."""

    success: bool
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    not_found: bool = False

    def raise_for_error(self) -> None:
        """
        Raise the typed application error for a failed result.

        Raises:
            NotFoundError: The target max log does not exist.
            ApplicationValidationError: Input failed domain validation.
            ApplicationError: Any other failure.
        """
        if self.success:
            return
        message = self.error or "Operation failed"
        if self.not_found:
            raise NotFoundError(message)
        if self.validation_errors:
            raise ApplicationValidationError(message, self.validation_errors)
        raise ApplicationError(message)
