"""
MaxLog entity - one recorded lift attempt with its derived 1RM estimates.

A MaxLog is immutable. Updates go through ``clone_with_update`` which
rebuilds the entity through validation, so the derived estimates are always
recomputed from the resulting weight and reps and never copied forward.
"""

import datetime as dt
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ValidationError
from domain.services.one_rep_max import OneRepMaxFormula, estimate_one_rep_max

# Derived field -> formula used to compute it
DERIVED_FIELDS: Dict[str, OneRepMaxFormula] = {
    "estimated_1rm": OneRepMaxFormula.AVERAGE,
    "max_brzycki": OneRepMaxFormula.BRZYCKI,
    "max_baechle": OneRepMaxFormula.BAECHLE,
}


def utcnow() -> dt.datetime:
    """Current time as a timezone-aware UTC datetime."""
    return dt.datetime.now(dt.timezone.utc)


def _format_errors(exc: PydanticValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "max_log"
        messages.append(f"{field}: {err.get('msg', 'invalid value')}")
    return messages


class LogComparison(BaseModel):
    """Difference between two logs' estimated 1RMs."""

    model_config = ConfigDict(frozen=True)

    difference: float
    percentage_improvement: float


class MaxLog(BaseModel):
    """
    Entity representing a single recorded lift (weight x reps on a date).

    Identity is the ``id``: two logs with identical lifts on the same date
    are still distinct records, and equality/hashing only consider ``id``.

    Derived estimates:
        - estimated_1rm: mean of every registered formula
        - max_brzycki: Brzycki estimate
        - max_baechle: Baechle (Epley-style) estimate

    A direct attempt (1 rep) is its own max: every estimate equals the weight.

    Examples:
        >>> log = MaxLog.create("profile-1", "bench", weight=100, reps=5,
        ...                     date=dt.date(2024, 3, 1))
        >>> log.max_brzycki
        112.5
        >>> log.is_direct_attempt()
        False
        >>> heavier = log.clone_with_update(weight=105)
        >>> heavier.id == log.id
        True
    """

    model_config = ConfigDict(frozen=True)

    # Identity and scope
    id: str = Field(..., min_length=1, description="Stable unique identifier")
    profile_id: str = Field(..., min_length=1, description="Owning profile")
    exercise_id: str = Field(..., min_length=1, description="Exercise performed")

    # Measured inputs
    weight: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Weight entered by the user"
    )
    reps: int = Field(..., ge=1, strict=True, description="Repetitions performed")
    date: dt.date = Field(..., description="Calendar date the lift was achieved")
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Derived outputs (recomputed on every construction)
    estimated_1rm: float = Field(default=0.0, validate_default=True)
    max_brzycki: float = Field(default=0.0, validate_default=True)
    max_baechle: float = Field(default=0.0, validate_default=True)

    # Timestamps
    created_at: dt.datetime
    updated_at: dt.datetime

    @field_validator(*DERIVED_FIELDS, mode="before")
    @classmethod
    def derive_estimate(cls, value: Any, info: ValidationInfo) -> float:
        """Ignore any supplied value and recompute from weight and reps."""
        weight = info.data.get("weight")
        reps = info.data.get("reps")
        if weight is None or reps is None:
            # weight/reps already failed validation and carry their own error
            return 0.0
        return estimate_one_rep_max(weight, reps, DERIVED_FIELDS[info.field_name])

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _build(
        cls,
        data: Dict[str, Any],
        *,
        now: Optional[dt.datetime] = None,
    ) -> "MaxLog":
        """Validate ``data`` into a MaxLog, rejecting future dates when ``now`` is given."""
        errors: List[str] = []

        log_date = data.get("date")
        if isinstance(log_date, dt.datetime):
            log_date = log_date.date()
            data = {**data, "date": log_date}

        if now is not None and now.tzinfo is not None:
            now = now.astimezone(dt.timezone.utc)
        if now is not None and isinstance(log_date, dt.date) and log_date > now.date():
            errors.append("date: Date cannot be in the future")

        instance = None
        try:
            instance = cls.model_validate(data)
        except PydanticValidationError as exc:
            errors = _format_errors(exc) + errors

        if errors:
            raise ValidationError("Max log validation failed", errors)
        return instance

    @classmethod
    def create(
        cls,
        profile_id: str,
        exercise_id: str,
        weight: float,
        reps: int,
        date: dt.date,
        notes: Optional[str] = None,
        *,
        now: Optional[dt.datetime] = None,
    ) -> "MaxLog":
        """
        Create a new max log with a fresh id and timestamps.

        Args:
            profile_id: Owning profile
            exercise_id: Exercise performed
            weight: Weight lifted (> 0)
            reps: Repetitions performed (integer >= 1, below 37)
            date: Date achieved (not after today)
            notes: Optional free text
            now: Clock override (defaults to current UTC time)

        Returns:
            The new MaxLog

        Raises:
            ValidationError: If any input violates a precondition.
        """
        now = now or utcnow()
        return cls._build(
            {
                "id": str(uuid.uuid4()),
                "profile_id": profile_id,
                "exercise_id": exercise_id,
                "weight": weight,
                "reps": reps,
                "date": date,
                "notes": notes,
                "created_at": now,
                "updated_at": now,
            },
            now=now,
        )

    @classmethod
    def hydrate(cls, data: Dict[str, Any]) -> "MaxLog":
        """
        Rebuild a MaxLog from persisted data.

        Stored derived values are ignored and recomputed. Historical dates
        are not checked against the current clock.

        Raises:
            ValidationError: If the stored data is invalid.
        """
        return cls._build(dict(data))

    def clone_with_update(
        self,
        *,
        weight: Optional[float] = None,
        reps: Optional[int] = None,
        date: Optional[dt.date] = None,
        notes: Optional[str] = None,
        clear_notes: bool = False,
        now: Optional[dt.datetime] = None,
    ) -> "MaxLog":
        """
        Return a new MaxLog with the given fields replaced.

        ``id`` and ``created_at`` are kept, ``updated_at`` is refreshed and
        the derived estimates are recomputed even when only ``notes`` changes.
        ``clear_notes`` removes the notes; ``notes=None`` alone keeps them.

        Raises:
            ValidationError: If the resulting log is invalid or the new date
                is in the future.
        """
        now = now or utcnow()
        data = self.model_dump(exclude=set(DERIVED_FIELDS))
        if weight is not None:
            data["weight"] = weight
        if reps is not None:
            data["reps"] = reps
        if date is not None:
            data["date"] = date
        if clear_notes:
            data["notes"] = None
        elif notes is not None:
            data["notes"] = notes
        data["updated_at"] = now

        return type(self)._build(data, now=now if date is not None else None)

    # -------------------------------------------------------------------------
    # Domain methods
    # -------------------------------------------------------------------------

    def is_direct_attempt(self) -> bool:
        """True when the lift was a single repetition."""
        return self.reps == 1

    @property
    def volume(self) -> float:
        """Weight x reps."""
        return self.weight * self.reps

    def compare_performance(self, other: "MaxLog") -> LogComparison:
        """
        Compare this log's estimated 1RM against another log.

        Returns:
            LogComparison with the absolute difference and the percentage
            relative to ``other``.
        """
        difference = self.estimated_1rm - other.estimated_1rm
        percentage = (
            difference / other.estimated_1rm * 100 if other.estimated_1rm > 0 else 0.0
        )
        return LogComparison(difference=difference, percentage_improvement=percentage)

    def bodyweight_ratio(self, bodyweight: float) -> float:
        """Estimated 1RM divided by bodyweight (0.0 for a non-positive bodyweight)."""
        if bodyweight <= 0:
            return 0.0
        return self.estimated_1rm / bodyweight

    def is_older_than(self, date: dt.date) -> bool:
        """True if this lift was achieved strictly before ``date``."""
        return self.date < date

    def summary(self) -> str:
        """Human-readable one-line summary."""
        return f"{self.weight:g} x {self.reps} reps (e1RM: {self.estimated_1rm:.1f})"

    def to_record(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict for persistence."""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxLog):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"MaxLog({self.exercise_id}: {self.summary()} on {self.date.isoformat()})"
