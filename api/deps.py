"""
FastAPI Dependency Providers for the max-log service.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository, service and use-case providers create new instances per-request
- Auth provider wraps backend.auth

Usage in routers:
    from api.deps import get_current_profile, get_max_log_repo
    from application.ports import MaxLogRepository

    @router.get("/max-logs")
    def list_max_logs(
        profile_id: str = Depends(get_current_profile),
        max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
    ):
        return max_log_repo.find_all(profile_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_max_log_repo] = lambda: FakeMaxLogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import MaxLogRepository

# Concrete implementations
from infrastructure import SupabaseMaxLogRepository

from application.use_cases import (
    DeleteMaxLogUseCase,
    GetMaxLogsUseCase,
    LogMaxLiftUseCase,
    RecordWorkoutPRsUseCase,
    UpdateMaxLogUseCase,
)
from backend.auth import get_current_profile as _get_current_profile
from backend.core.records_service import RecordsService
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_max_log_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> MaxLogRepository:
    """
    Get max-log repository instance.

    Returns:
        MaxLogRepository: Supabase-backed repository scoped per request
    """
    return SupabaseMaxLogRepository(client, table=settings.max_logs_table)


# =============================================================================
# Service and Use Case Providers
# =============================================================================


def get_records_service(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
    settings: Settings = Depends(get_settings),
) -> RecordsService:
    """Get the personal-record query service."""
    return RecordsService(
        max_log_repo,
        recent_days=settings.recent_records_days,
        strongest_limit=settings.strongest_exercises_limit,
    )


def get_log_max_lift_use_case(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
) -> LogMaxLiftUseCase:
    return LogMaxLiftUseCase(max_log_repo=max_log_repo)


def get_update_max_log_use_case(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
) -> UpdateMaxLogUseCase:
    return UpdateMaxLogUseCase(max_log_repo=max_log_repo)


def get_delete_max_log_use_case(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
) -> DeleteMaxLogUseCase:
    return DeleteMaxLogUseCase(max_log_repo=max_log_repo)


def get_get_max_logs_use_case(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
) -> GetMaxLogsUseCase:
    return GetMaxLogsUseCase(max_log_repo=max_log_repo)


def get_record_workout_prs_use_case(
    max_log_repo: MaxLogRepository = Depends(get_max_log_repo),
) -> RecordWorkoutPRsUseCase:
    return RecordWorkoutPRsUseCase(max_log_repo=max_log_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_profile(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated profile ID.

    Wraps backend.auth.get_current_profile for dependency injection.
    Supports:
    - HS256 bearer JWT ("sub" claim)
    - API key authentication ("key" or "key:profile_id")

    Raises:
        HTTPException: 401 if authentication fails
    """
    return _get_current_profile(
        authorization=authorization,
        x_api_key=x_api_key,
        settings=settings,
    )
