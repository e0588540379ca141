"""Volume dashboard and profile schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from liftlog.core.enums import TimeRange, UnitPreference


class DailyVolumeRecord(BaseModel):
    """One stored per-day total. date is the UTC calendar day."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    date: date
    volume: float = 0.0


class VolumeBucket(BaseModel):
    label: str
    volume: float


class VolumeSeriesRead(BaseModel):
    time_range: TimeRange
    tz_offset_minutes: int
    buckets: list[VolumeBucket]
    total_volume: float


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_workouts: int = 0
    total_volume: float = 0.0
    unit_preference: UnitPreference = UnitPreference.KG


class ProfileUpdate(BaseModel):
    unit_preference: UnitPreference | None = None


class DashboardRead(BaseModel):
    profile: ProfileRead
    volume: VolumeSeriesRead
