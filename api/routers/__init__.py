"""
Router package for the max-log API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- max_logs: Max-log CRUD and per-log calculations
- records: Personal records, trends and workout PR checks
- one_rep_max: Stateless 1RM calculator
"""

from api.routers.health import router as health_router
from api.routers.max_logs import router as max_logs_router
from api.routers.one_rep_max import router as one_rep_max_router
from api.routers.records import router as records_router

__all__ = [
    "health_router",
    "max_logs_router",
    "records_router",
    "one_rep_max_router",
]
