"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseMaxLogRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    max_log_repo = SupabaseMaxLogRepository(client)

    # Use in use cases
    use_case = LogMaxLiftUseCase(max_log_repo=max_log_repo)
"""

from infrastructure.db.max_log_repository import SupabaseMaxLogRepository

__all__ = [
    "SupabaseMaxLogRepository",
]
