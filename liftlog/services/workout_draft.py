"""In-progress workout held by the client session until it is saved."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import date

from liftlog.core.constants import MAX_EXERCISES_PER_SESSION, MAX_SETS_PER_EXERCISE_PER_SESSION
from liftlog.core.enums import ExerciseType
from liftlog.core.exceptions import WorkoutValidationError
from liftlog.schemas.exercise import ExerciseCapability, ExerciseRead
from liftlog.schemas.workout import (
    NewSet,
    NewWorkout,
    NewWorkoutExercise,
    SetEntry,
    WorkoutExerciseEntry,
)
from liftlog.services.workout_validation import filter_for_save, is_workout_valid, set_validity

logger = logging.getLogger(__name__)


def blank_set(capability: ExerciseCapability | None, set_number: int = 1) -> SetEntry:
    """Tracked metrics start at 0, untracked ones stay absent."""
    cap = capability or ExerciseCapability()
    return SetEntry(
        set_number=set_number,
        reps=0 if cap.uses_reps else None,
        weight_kg=0 if cap.uses_weight else None,
        duration_seconds=0 if cap.uses_duration else None,
        distance_meters=0 if cap.uses_distance else None,
    )


class WorkoutDraft:
    """
    Ordered exercises and their sets, edited in place.

    order is kept dense (1..N): removing an exercise renumbers the rest.
    Nothing here touches the database; to_new_workout builds the payload
    for liftlog.services.workout_store.
    """

    def __init__(self, exercises: Iterable[WorkoutExerciseEntry] = ()) -> None:
        self.exercises: list[WorkoutExerciseEntry] = list(exercises)

    def __len__(self) -> int:
        return len(self.exercises)

    def add_exercises(self, selected: Sequence[ExerciseRead]) -> list[WorkoutExerciseEntry]:
        """Append one entry per selected exercise, each with a single blank set."""
        if len(self.exercises) + len(selected) > MAX_EXERCISES_PER_SESSION:
            raise WorkoutValidationError(
                f"Maximum {MAX_EXERCISES_PER_SESSION} exercises per session."
            )
        start = len(self.exercises)
        added = []
        for i, exercise in enumerate(selected):
            capability = exercise.capability
            is_user = exercise.source == ExerciseType.USER
            added.append(
                WorkoutExerciseEntry(
                    instance_id=str(uuid.uuid4()),
                    exercise_type=exercise.source,
                    predefined_exercise_id=None if is_user else exercise.id,
                    user_exercise_id=exercise.id if is_user else None,
                    order=start + i + 1,
                    capability=capability,
                    sets=[blank_set(capability)],
                )
            )
        self.exercises.extend(added)
        return added

    def remove_exercise(self, index: int) -> None:
        if not 0 <= index < len(self.exercises):
            logger.error("Invalid exercise index: %s", index)
            return
        remaining = [ex for i, ex in enumerate(self.exercises) if i != index]
        self.exercises = [ex.model_copy(update={"order": i + 1}) for i, ex in enumerate(remaining)]

    def update_sets(self, index: int, sets: Sequence[SetEntry]) -> None:
        if not 0 <= index < len(self.exercises):
            logger.error("Invalid exercise index: %s", index)
            return
        self.exercises[index] = self.exercises[index].model_copy(update={"sets": list(sets)})

    def add_set(self, index: int) -> SetEntry | None:
        """Append a blank set numbered after the exercise's last set."""
        if not 0 <= index < len(self.exercises):
            logger.error("Invalid exercise index: %s", index)
            return None
        entry = self.exercises[index]
        if len(entry.sets) >= MAX_SETS_PER_EXERCISE_PER_SESSION:
            raise WorkoutValidationError(
                f"Maximum {MAX_SETS_PER_EXERCISE_PER_SESSION} sets per exercise per session."
            )
        next_number = max((s.set_number for s in entry.sets), default=0) + 1
        new_set = blank_set(entry.capability, next_number)
        self.update_sets(index, [*entry.sets, new_set])
        return new_set

    @property
    def can_save(self) -> bool:
        return is_workout_valid(self.exercises)

    def validity(self) -> list[list[bool]]:
        return set_validity(self.exercises)

    def to_new_workout(self, user_id: uuid.UUID, workout_date: date | None = None) -> NewWorkout:
        """Filtered save payload. Raises WorkoutValidationError if no set is valid."""
        if not self.can_save:
            raise WorkoutValidationError()
        return NewWorkout(
            user_id=user_id,
            workout_date=workout_date,
            exercises=[
                NewWorkoutExercise(
                    exercise_type=ex.exercise_type,
                    predefined_exercise_id=ex.predefined_exercise_id,
                    user_exercise_id=ex.user_exercise_id,
                    order=ex.order,
                    effort_level=ex.effort_level,
                    sets=[NewSet(**s.model_dump()) for s in ex.sets],
                )
                for ex in filter_for_save(self.exercises)
            ],
        )

    def clear(self) -> None:
        """Forget the draft. Only call after the save was confirmed."""
        self.exercises = []
