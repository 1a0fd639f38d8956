"""
API package for the max-log service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: use-case result to HTTP error translation
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_max_log_repo,
    get_records_service,
    get_current_profile,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories and services
    "get_max_log_repo",
    "get_records_service",
    # Authentication
    "get_current_profile",
]
