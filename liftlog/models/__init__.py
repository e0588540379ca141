"""ORM models - import all so Base.metadata is complete for migrations."""

from liftlog.models.daily_volume import DailyVolume
from liftlog.models.exercise import Exercise, UserExercise
from liftlog.models.profile import Profile
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "DailyVolume",
    "Exercise",
    "Profile",
    "UserExercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
