"""Workout draft, save payload and history view-model schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.constants import MAX_EXERCISES_PER_SESSION, MAX_SETS_PER_EXERCISE_PER_SESSION
from liftlog.core.enums import EffortLevel, ExerciseCategory, ExerciseType
from liftlog.schemas.exercise import ExerciseCapability


class SetEntry(BaseModel):
    """One set as edited in a draft. Absent metrics count as zero."""

    model_config = ConfigDict(from_attributes=True)

    set_number: int = Field(1, ge=1)
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    distance_meters: float | None = None


class WorkoutExerciseEntry(BaseModel):
    """An exercise at a position in the draft, with its sets."""

    instance_id: str | None = None
    exercise_type: ExerciseType = ExerciseType.PREDEFINED
    predefined_exercise_id: UUID | None = None
    user_exercise_id: UUID | None = None
    order: int = Field(..., ge=1)
    effort_level: EffortLevel | None = None
    # None while the catalog is still loading: no metric is required
    capability: ExerciseCapability | None = None
    sets: list[SetEntry] = Field(default_factory=list, max_length=MAX_SETS_PER_EXERCISE_PER_SESSION)

    @property
    def exercise_id(self) -> UUID | None:
        if self.exercise_type == ExerciseType.USER:
            return self.user_exercise_id
        return self.predefined_exercise_id


class WorkoutDraftIn(BaseModel):
    """Draft sent by the client, for validation or saving."""

    workout_date: date | None = None
    exercises: list[WorkoutExerciseEntry] = Field(
        default_factory=list, max_length=MAX_EXERCISES_PER_SESSION
    )


class DraftValidationRead(BaseModel):
    can_save: bool
    # sets[i][j]: validity of set j of exercise i, in draft order
    sets: list[list[bool]]
    exercises: list[WorkoutExerciseEntry]


class NewSet(BaseModel):
    set_number: int | None = None
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    distance_meters: float | None = None


class NewWorkoutExercise(BaseModel):
    exercise_type: ExerciseType
    predefined_exercise_id: UUID | None = None
    user_exercise_id: UUID | None = None
    order: int
    effort_level: EffortLevel | None = None
    sets: list[NewSet]


class NewWorkout(BaseModel):
    """Filtered payload handed to persistence. workout_date None means today."""

    user_id: UUID
    workout_date: date | None = None
    exercises: list[NewWorkoutExercise]


class WorkoutSavedRead(BaseModel):
    id: UUID
    workout_date: date
    exercise_count: int
    set_count: int
    total_volume: float


# ── History view-models ─────────────────────────────────────────────────


class UISet(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workout_exercise_id: UUID
    set_number: int
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    distance_meters: float | None = None
    created_at: datetime | None = None


class UIExercise(BaseModel):
    id: UUID | None = None
    name: str = "Unknown"
    primary_muscle_group: str = "other"
    secondary_muscle_group: str | None = None
    category: ExerciseCategory | str = ExerciseCategory.OTHER
    uses_reps: bool = True
    uses_weight: bool = True
    uses_duration: bool = False
    uses_distance: bool = False
    is_deleted: bool = False
    source: ExerciseType


class UIWorkoutExercise(BaseModel):
    id: UUID
    workout_id: UUID
    instance_id: str
    exercise_type: ExerciseType
    predefined_exercise_id: UUID | None = None
    user_exercise_id: UUID | None = None
    order: int
    effort_level: EffortLevel | None = None
    created_at: datetime | None = None
    exercise: UIExercise
    sets: list[UISet] = []


class UIWorkout(BaseModel):
    """A saved workout shaped for the history screen (local date/time, total volume)."""

    id: UUID
    user_id: UUID
    workout_date: date
    created_at: datetime
    date: str
    time: str
    total_volume: float
    exercises: list[UIWorkoutExercise] = []
