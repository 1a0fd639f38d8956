"""
DeleteMaxLog Use Case.

Deleting a max log that does not exist succeeds without doing anything.
"""

import logging
from dataclasses import dataclass

from application.ports import MaxLogRepository
from application.use_cases.result import UseCaseResult

logger = logging.getLogger(__name__)


@dataclass
class DeleteMaxLogResult(UseCaseResult):
    """Result of deleting a max log."""

    existed: bool = False


class DeleteMaxLogUseCase:
    """Use case for removing a recorded lift."""

    def __init__(self, max_log_repo: MaxLogRepository) -> None:
        self._max_log_repo = max_log_repo

    def execute(self, profile_id: str, max_log_id: str) -> DeleteMaxLogResult:
        """
        Delete a max log scoped to a profile.

        Returns:
            DeleteMaxLogResult; ``existed`` tells whether anything was removed
        """
        try:
            existed = self._max_log_repo.find_by_id(profile_id, max_log_id) is not None
            self._max_log_repo.delete(profile_id, max_log_id)
        except Exception as e:
            logger.exception("Failed to delete max log %s", max_log_id)
            return DeleteMaxLogResult(success=False, error=f"Failed to delete max log: {e}")

        if existed:
            logger.info("Deleted max log %s for profile %s", max_log_id, profile_id)
        else:
            logger.debug("Max log %s already absent for profile %s", max_log_id, profile_id)
        return DeleteMaxLogResult(success=True, existed=existed)
