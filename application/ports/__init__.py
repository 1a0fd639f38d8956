"""
Repository Interfaces (Ports) for the max-log service.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import MaxLogRepository

    class RecordsService:
        def __init__(self, max_log_repo: MaxLogRepository):
            self._max_log_repo = max_log_repo
"""

from application.ports.max_log_repository import MaxLogRepository

__all__ = [
    "MaxLogRepository",
]
