"""
Infrastructure Layer for the max-log service.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseMaxLogRepository

__all__ = [
    "SupabaseMaxLogRepository",
]
