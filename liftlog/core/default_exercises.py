"""Predefined exercise catalog seeded into the exercises table.

Capability flags follow how each movement is logged: barbell lifts track
reps and weight, holds track duration, cardio tracks duration and distance.
"""

from liftlog.core.enums import ExerciseCategory

# (name, category, primary muscle, secondary muscle, uses_reps, uses_weight, uses_duration, uses_distance)
_CATALOG: list[tuple[str, ExerciseCategory, str, str | None, bool, bool, bool, bool]] = [
    ("Bench Press",        ExerciseCategory.STRENGTH,   "chest",      "triceps",   True,  True,  False, False),
    ("Squat",              ExerciseCategory.STRENGTH,   "quads",      "glutes",    True,  True,  False, False),
    ("Deadlift",           ExerciseCategory.STRENGTH,   "hamstrings", "back",      True,  True,  False, False),
    ("Overhead Press",     ExerciseCategory.STRENGTH,   "shoulders",  "triceps",   True,  True,  False, False),
    ("Barbell Row",        ExerciseCategory.STRENGTH,   "back",       "biceps",    True,  True,  False, False),
    ("Dumbbell Curl",      ExerciseCategory.STRENGTH,   "biceps",     None,        True,  True,  False, False),
    ("Pull-up",            ExerciseCategory.BODYWEIGHT, "back",       "biceps",    True,  False, False, False),
    ("Push-up",            ExerciseCategory.BODYWEIGHT, "chest",      "triceps",   True,  False, False, False),
    ("Plank",              ExerciseCategory.BODYWEIGHT, "core",       None,        False, False, True,  False),
    ("Farmer's Carry",     ExerciseCategory.STRENGTH,   "forearms",   "traps",     False, True,  False, True),
    ("Running",            ExerciseCategory.CARDIO,     "legs",       None,        False, False, True,  True),
    ("Rowing Machine",     ExerciseCategory.CARDIO,     "back",       "legs",      False, False, True,  True),
    ("Jump Rope",          ExerciseCategory.CARDIO,     "calves",     None,        False, False, True,  False),
    ("Hip Mobility Flow",  ExerciseCategory.MOBILITY,   "hips",       None,        False, False, False, False),
]

DEFAULT_EXERCISES: list[dict] = [
    {
        "name": name,
        "category": category,
        "primary_muscle_group": primary,
        "secondary_muscle_group": secondary,
        "uses_reps": reps,
        "uses_weight": weight,
        "uses_duration": duration,
        "uses_distance": distance,
    }
    for name, category, primary, secondary, reps, weight, duration, distance in _CATALOG
]
