"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.enums import ExerciseCategory, ExerciseType


class ExerciseCapability(BaseModel):
    """Which metrics a set of this exercise is expected to carry. Unknown flags are False."""

    model_config = ConfigDict(from_attributes=True)

    uses_reps: bool = False
    uses_weight: bool = False
    uses_duration: bool = False
    uses_distance: bool = False


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: ExerciseCategory = ExerciseCategory.OTHER
    primary_muscle_group: str | None = Field(None, max_length=100)
    secondary_muscle_group: str | None = Field(None, max_length=100)
    uses_reps: bool = False
    uses_weight: bool = False
    uses_duration: bool = False
    uses_distance: bool = False


class UserExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    """Catalog entry: predefined and user-authored exercises share this shape."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID
    source: ExerciseType = ExerciseType.PREDEFINED
    is_deleted: bool = False

    @property
    def capability(self) -> ExerciseCapability:
        return ExerciseCapability(
            uses_reps=self.uses_reps,
            uses_weight=self.uses_weight,
            uses_duration=self.uses_duration,
            uses_distance=self.uses_distance,
        )
