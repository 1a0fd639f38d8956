"""
Application Use Cases for the max-log service.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return Result objects, never raise

Usage:
    from application.use_cases import LogMaxLiftUseCase, RecordWorkoutPRsUseCase

    # Log a lift
    log_use_case = LogMaxLiftUseCase(max_log_repo=repo)
    result = log_use_case.execute(
        profile_id="profile-1",
        exercise_id="bench",
        weight=100,
        reps=5,
        date=date(2024, 3, 1),
    )

    # Check a finished workout for records
    pr_use_case = RecordWorkoutPRsUseCase(max_log_repo=repo)
    result = pr_use_case.execute(workout)
    for alert in result.alerts:
        print(alert.type, alert.exercise_name)
"""

from application.use_cases.delete_max_log import DeleteMaxLogResult, DeleteMaxLogUseCase
from application.use_cases.get_max_logs import (
    BodyweightRatioResult,
    CompareMaxLogsResult,
    GetMaxLogResult,
    GetMaxLogsUseCase,
    LatestMaxLogsResult,
    ListMaxLogsResult,
    MaxLogSummaryResult,
)
from application.use_cases.log_max_lift import (
    LogMaxLiftBatchResult,
    LogMaxLiftResult,
    LogMaxLiftUseCase,
    MaxLogInput,
)
from application.use_cases.record_workout_prs import (
    RecordWorkoutPRsResult,
    RecordWorkoutPRsUseCase,
)
from application.use_cases.result import UseCaseResult
from application.use_cases.update_max_log import UpdateMaxLogResult, UpdateMaxLogUseCase

__all__ = [
    "UseCaseResult",
    # LogMaxLift
    "LogMaxLiftUseCase",
    "LogMaxLiftResult",
    "LogMaxLiftBatchResult",
    "MaxLogInput",
    # UpdateMaxLog
    "UpdateMaxLogUseCase",
    "UpdateMaxLogResult",
    # DeleteMaxLog
    "DeleteMaxLogUseCase",
    "DeleteMaxLogResult",
    # GetMaxLogs
    "GetMaxLogsUseCase",
    "GetMaxLogResult",
    "ListMaxLogsResult",
    "LatestMaxLogsResult",
    "CompareMaxLogsResult",
    "BodyweightRatioResult",
    "MaxLogSummaryResult",
    # RecordWorkoutPRs
    "RecordWorkoutPRsUseCase",
    "RecordWorkoutPRsResult",
]
