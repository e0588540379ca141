"""Decide which sets of a workout are worth saving."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from liftlog.schemas.workout import WorkoutExerciseEntry

# capability flag -> set field it requires
METRIC_FIELDS = (
    ("uses_reps", "reps"),
    ("uses_weight", "weight_kg"),
    ("uses_duration", "duration_seconds"),
    ("uses_distance", "distance_meters"),
)


def _value(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def is_set_valid(set_entry: Any, capability: Any) -> bool:
    """
    A set is valid when the metrics its exercise tracks are filled in (> 0).

    No tracked metric: any set is valid. One tracked metric: it must be > 0.
    Several tracked metrics: every one of them must be > 0.
    A missing capability, or a missing flag, means the metric is not tracked.
    """
    required = 0
    satisfied = 0
    for flag, field in METRIC_FIELDS:
        if not _value(capability, flag):
            continue
        required += 1
        if (_value(set_entry, field) or 0) > 0:
            satisfied += 1
    if required == 0:
        return True
    if required == 1:
        return satisfied >= 1
    return satisfied == required


def set_validity(exercises: Sequence[WorkoutExerciseEntry]) -> list[list[bool]]:
    """Per-set validity, indexed like the draft."""
    return [[is_set_valid(s, ex.capability) for s in ex.sets] for ex in exercises]


def is_workout_valid(exercises: Sequence[WorkoutExerciseEntry]) -> bool:
    """True as soon as any exercise has one valid set. Exercises without sets are ignored."""
    return any(
        is_set_valid(s, ex.capability)
        for ex in exercises
        if ex.sets
        for s in ex.sets
    )


def filter_for_save(exercises: Sequence[WorkoutExerciseEntry]) -> list[WorkoutExerciseEntry]:
    """
    Keep only valid sets and drop exercises left empty.

    order and set_number are kept as they were in the draft. Returns new
    entries; the input is not modified.
    """
    kept = []
    for ex in exercises:
        sets = [s for s in ex.sets if is_set_valid(s, ex.capability)]
        if sets:
            kept.append(ex.model_copy(update={"sets": sets}))
    return kept
