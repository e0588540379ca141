"""Initial schema: profiles, exercise catalogs, workouts, sets, daily_volume.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

exercise_category = postgresql.ENUM(
    "STRENGTH", "CARDIO", "BODYWEIGHT", "MOBILITY", "OTHER", name="exercisecategory", create_type=False
)
exercise_type = postgresql.ENUM("PREDEFINED", "USER", name="exercisetype", create_type=False)
effort_level = postgresql.ENUM("EASY", "OK", "HARD", "MAXED", name="effortlevel", create_type=False)
unit_preference = postgresql.ENUM("KG", "LBS", name="unitpreference", create_type=False)


def _exercise_columns() -> list[sa.Column]:
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", exercise_category, nullable=False),
        sa.Column("primary_muscle_group", sa.String(length=100), nullable=True),
        sa.Column("secondary_muscle_group", sa.String(length=100), nullable=True),
        sa.Column("uses_reps", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("uses_weight", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("uses_duration", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("uses_distance", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum in (exercise_category, exercise_type, effort_level, unit_preference):
        enum.create(bind, checkfirst=True)

    op.create_table(
        "profiles",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("total_workouts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_volume", sa.Float(), nullable=False, server_default="0"),
        sa.Column("unit_preference", unit_preference, nullable=False, server_default="KG"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "exercises",
        *_exercise_columns(),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)

    op.create_table(
        "user_exercises",
        *_exercise_columns(),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_exercises_name"), "user_exercises", ["name"], unique=False)
    op.create_index(op.f("ix_user_exercises_user_id"), "user_exercises", ["user_id"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_user_created", "workouts", ["user_id", "created_at"], unique=False)

    op.create_table(
        "workout_exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_type", exercise_type, nullable=False),
        sa.Column("predefined_exercise_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("user_exercise_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("effort_level", effort_level, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["predefined_exercise_id"], ["exercises.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["user_exercise_id"], ["user_exercises.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_exercises_workout_id", "workout_exercises", ["workout_id"], unique=False)

    op.create_table(
        "sets",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("weight_kg", sa.Numeric(precision=8, scale=2), nullable=True),
        sa.Column("duration_seconds", sa.Integer(), nullable=True),
        sa.Column("distance_meters", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["workout_exercise_id"], ["workout_exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sets_workout_exercise_id", "sets", ["workout_exercise_id"], unique=False)

    op.create_table(
        "daily_volume",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("volume", sa.Float(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_volume_user_date"),
    )
    op.create_index(op.f("ix_daily_volume_user_id"), "daily_volume", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_daily_volume_user_id"), table_name="daily_volume")
    op.drop_table("daily_volume")
    op.drop_index("ix_sets_workout_exercise_id", table_name="sets")
    op.drop_table("sets")
    op.drop_index("ix_workout_exercises_workout_id", table_name="workout_exercises")
    op.drop_table("workout_exercises")
    op.drop_index("ix_workouts_user_created", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index(op.f("ix_user_exercises_user_id"), table_name="user_exercises")
    op.drop_index(op.f("ix_user_exercises_name"), table_name="user_exercises")
    op.drop_table("user_exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_table("profiles")
    bind = op.get_bind()
    for enum in (unit_preference, effort_level, exercise_type, exercise_category):
        enum.drop(bind, checkfirst=True)
