"""
Supabase Max Log Repository Implementation.

This module implements the MaxLogRepository protocol using Supabase.
Rows are stored with their derived estimates for querying convenience, but
entities are always rebuilt through ``MaxLog.hydrate`` so the estimates
returned to callers are recomputed from weight and reps.
"""
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from domain.exceptions import ValidationError
from domain.models import MaxLog

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "max_logs"


class SupabaseMaxLogRepository:
    """
    Supabase implementation of MaxLogRepository.

    Every query is filtered by profile_id, so a log owned by another
    profile behaves exactly like a missing one.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table: Name of the max-log table
        """
        self._client = client
        self._table = table

    def _to_entity(self, row: Dict[str, Any]) -> Optional[MaxLog]:
        try:
            return MaxLog.hydrate(row)
        except ValidationError as e:
            logger.warning(f"Skipping invalid max log row {row.get('id')}: {e.errors}")
            return None

    def save(self, max_log: MaxLog) -> MaxLog:
        """Upsert a max log by id (last write wins)."""
        try:
            result = self._client.table(self._table) \
                .upsert(max_log.to_record(), on_conflict="id") \
                .execute()
        except Exception as e:
            logger.error(f"Failed to save max log {max_log.id}: {e}")
            raise

        if result.data:
            saved = self._to_entity(result.data[0])
            if saved is not None:
                return saved
        return max_log

    def find_by_id(self, profile_id: str, max_log_id: str) -> Optional[MaxLog]:
        """Get a single max log by ID."""
        try:
            result = self._client.table(self._table) \
                .select("*") \
                .eq("id", max_log_id) \
                .eq("profile_id", profile_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to get max log {max_log_id}: {e}")
            return None

        if not result.data:
            return None
        return self._to_entity(result.data[0])

    def find_all(self, profile_id: str) -> List[MaxLog]:
        """Get all max logs for a profile, oldest first."""
        try:
            result = self._client.table(self._table) \
                .select("*") \
                .eq("profile_id", profile_id) \
                .order("date") \
                .order("created_at") \
                .execute()
        except Exception as e:
            logger.error(f"Failed to list max logs for profile {profile_id}: {e}")
            raise

        max_logs = []
        for row in result.data or []:
            max_log = self._to_entity(row)
            if max_log is not None:
                max_logs.append(max_log)
        return max_logs

    def delete(self, profile_id: str, max_log_id: str) -> None:
        """Delete a max log. Missing ids are ignored."""
        try:
            result = self._client.table(self._table) \
                .delete() \
                .eq("id", max_log_id) \
                .eq("profile_id", profile_id) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to delete max log {max_log_id}: {e}")
            raise

        deleted_count = len(result.data) if result.data else 0
        if deleted_count == 0:
            logger.debug(f"No max log {max_log_id} for profile {profile_id} (0 rows deleted)")
