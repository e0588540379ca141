"""Shared enums for models and API."""

from enum import Enum


class TimeRange(str, Enum):
    """Dashboard volume range: lookback window and bucket granularity."""

    DAYS = "7days"  # 7 daily buckets
    WEEKS = "8weeks"  # 8 Monday-anchored weekly buckets
    MONTHS = "12months"  # 12 calendar-month buckets


class ExerciseType(str, Enum):
    """Where an exercise definition lives."""

    PREDEFINED = "predefined"  # System-owned, immutable to users
    USER = "user"  # Authored by a single user


class EffortLevel(str, Enum):
    """Optional perceived effort for an exercise within a workout."""

    EASY = "easy"
    OK = "ok"
    HARD = "hard"
    MAXED = "maxed"


class ExerciseCategory(str, Enum):
    """Coarse exercise category used for browsing the catalog."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    BODYWEIGHT = "bodyweight"
    MOBILITY = "mobility"
    OTHER = "other"


class UnitPreference(str, Enum):
    """Weight unit the user reads volume in."""

    KG = "kg"
    LBS = "lbs"
