"""Pytest configuration and fixtures."""

import uuid
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import ExerciseType
from liftlog.db.session import get_db
from liftlog.main import app
from liftlog.schemas.exercise import ExerciseCapability, ExerciseRead
from liftlog.schemas.workout import SetEntry, WorkoutExerciseEntry

USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")

REPS_ONLY = ExerciseCapability(uses_reps=True)
REPS_WEIGHT = ExerciseCapability(uses_reps=True, uses_weight=True)
DURATION_ONLY = ExerciseCapability(uses_duration=True)
NOTHING_TRACKED = ExerciseCapability()


def make_entry(order, capability, *sets, exercise_type=ExerciseType.PREDEFINED):
    """Draft entry with sets given as dicts of metric values."""
    exercise_id = uuid.uuid4()
    return WorkoutExerciseEntry(
        exercise_type=exercise_type,
        predefined_exercise_id=exercise_id if exercise_type == ExerciseType.PREDEFINED else None,
        user_exercise_id=exercise_id if exercise_type == ExerciseType.USER else None,
        order=order,
        capability=capability,
        sets=[SetEntry(set_number=i + 1, **s) for i, s in enumerate(sets)],
    )


@pytest.fixture
def user_id():
    return USER_ID


@pytest.fixture
def bench_press():
    return ExerciseRead(id=uuid.uuid4(), name="Bench Press", uses_reps=True, uses_weight=True)


@pytest.fixture
def plank():
    return ExerciseRead(id=uuid.uuid4(), name="Plank", uses_duration=True)


@pytest.fixture
def my_exercise():
    return ExerciseRead(
        id=uuid.uuid4(), name="Sled Push", uses_distance=True, source=ExerciseType.USER
    )


@pytest.fixture
def db_session():
    """AsyncSession stand-in: add() is sync, execute/flush/delete are AsyncMocks.

    execute() returns a result whose lookups find nothing unless a test says otherwise.
    """
    session = MagicMock(spec=AsyncSession)
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    result.scalars.return_value.all.return_value = []
    result.all.return_value = []
    session.execute.return_value = result
    return session


@pytest.fixture
def client(db_session):
    """Test client with the database dependency replaced by db_session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-Id": str(USER_ID)}
