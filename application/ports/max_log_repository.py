"""
Max Log Repository Interface (Port).

This module defines the abstract interface for max-log persistence.
Every operation is scoped to a profile: a log owned by another profile is
invisible, exactly as if it did not exist.
"""
from typing import List, Optional, Protocol

from domain.models import MaxLog


class MaxLogRepository(Protocol):
    """
    Abstract interface for max-log persistence.

    Implementations store complete MaxLog entities and return them
    rebuilt through ``MaxLog.hydrate`` so derived estimates are always
    recomputed on read.
    """

    def save(self, max_log: MaxLog) -> MaxLog:
        """
        Insert or replace a max log (last write wins).

        Args:
            max_log: Entity to persist

        Returns:
            The persisted entity
        """
        ...

    def find_by_id(self, profile_id: str, max_log_id: str) -> Optional[MaxLog]:
        """
        Get a single max log.

        Args:
            profile_id: Owning profile
            max_log_id: Max log UUID

        Returns:
            MaxLog or None if not found for this profile
        """
        ...

    def find_all(self, profile_id: str) -> List[MaxLog]:
        """
        Get every max log of a profile.

        Returns:
            Logs ordered by date, oldest first
        """
        ...

    def delete(self, profile_id: str, max_log_id: str) -> None:
        """
        Delete a max log. Deleting a missing id is a no-op.
        """
        ...
