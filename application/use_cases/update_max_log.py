"""
UpdateMaxLog Use Case.

Replaces fields of an existing max log. The stored entity is never mutated:
a new instance is built with refreshed estimates and saved over the old one.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional

from application.ports import MaxLogRepository
from application.use_cases.result import UseCaseResult
from domain.exceptions import ValidationError
from domain.models import MaxLog

logger = logging.getLogger(__name__)


@dataclass
class UpdateMaxLogResult(UseCaseResult):
    """Result of updating a max log."""

    max_log: Optional[MaxLog] = None
    previous: Optional[MaxLog] = None


class UpdateMaxLogUseCase:
    """Use case for editing a recorded lift."""

    def __init__(
        self,
        max_log_repo: MaxLogRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._max_log_repo = max_log_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(
        self,
        profile_id: str,
        max_log_id: str,
        *,
        weight: Optional[float] = None,
        reps: Optional[int] = None,
        date: Optional[date] = None,
        notes: Optional[str] = None,
        clear_notes: bool = False,
    ) -> UpdateMaxLogResult:
        """
        Update a max log.

        Args:
            profile_id: Owning profile
            max_log_id: Max log to update
            weight, reps, date, notes: Replacement values; None keeps the current one
            clear_notes: Remove the stored notes

        Returns:
            UpdateMaxLogResult with the new and previous versions
        """
        try:
            existing = self._max_log_repo.find_by_id(profile_id, max_log_id)
        except Exception as e:
            logger.exception("Failed to load max log %s", max_log_id)
            return UpdateMaxLogResult(success=False, error=f"Failed to load max log: {e}")

        if existing is None:
            logger.warning("Max log not found: %s (profile %s)", max_log_id, profile_id)
            return UpdateMaxLogResult(
                success=False,
                error=f"Max log not found: {max_log_id}",
                not_found=True,
            )

        try:
            updated = existing.clone_with_update(
                weight=weight,
                reps=reps,
                date=date,
                notes=notes,
                clear_notes=clear_notes,
                now=self._clock(),
            )
        except ValidationError as e:
            logger.warning("Max log update rejected for %s: %s", max_log_id, e.errors)
            return UpdateMaxLogResult(
                success=False, error=e.message, validation_errors=e.errors
            )

        try:
            saved = self._max_log_repo.save(updated)
        except Exception as e:
            logger.exception("Failed to save updated max log %s", max_log_id)
            return UpdateMaxLogResult(success=False, error=f"Failed to save max log: {e}")

        logger.info("Updated max log %s: %s", max_log_id, saved.summary())
        return UpdateMaxLogResult(success=True, max_log=saved, previous=existing)
