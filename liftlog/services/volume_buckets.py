"""Bucket stored daily volume into the viewer's local days, weeks or months.

daily_volume rows carry a UTC calendar date. Each date is read as UTC midnight
and shifted by the viewer's offset, so a row can land on the neighbouring
local day (offset -300 puts "2023-10-15" on local Oct 14). Buckets are then
built backwards from the local "today":

- 7days:    7 days ending today, labelled "Mar 5"
- 8weeks:   8 Monday-start weeks, the last containing today, labelled by Monday
- 12months: 12 calendar months, the last containing today, labelled "Mar 23"

The output always has 7/8/12 entries, oldest first; missing days are zero.
The offset is a parameter rather than read from the clock, so callers pass
the offset in force at the time of the request (DST included).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from liftlog.core.constants import BUCKET_COUNTS, LOOKBACK_DAYS
from liftlog.core.enums import TimeRange
from liftlog.schemas.volume import VolumeBucket


def lookback_days(time_range: TimeRange) -> int:
    """Days of stored rows the fetch layer must cover for this range."""
    return LOOKBACK_DAYS[TimeRange(time_range)]


def local_date(value: date | str, offset_minutes: int) -> date:
    """Local calendar date of a UTC date, read as midnight UTC.

    Raises ValueError for a string that is not YYYY-MM-DD.
    """
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        value = date.fromisoformat(value.strip())
    midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return (midnight + timedelta(minutes=offset_minutes)).date()


def local_today(now: datetime, offset_minutes: int) -> date:
    """Local date of an instant. Naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now.astimezone(timezone.utc) + timedelta(minutes=offset_minutes)).date()


def _week_start(d: date) -> date:
    return d - timedelta(days=d.weekday())


def _add_months(d: date, months: int) -> date:
    """First day of the month `months` away from d's month."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def _day_label(d: date) -> str:
    return f"{d:%b} {d.day}"


def _month_label(d: date) -> str:
    return f"{d:%b %y}"


def bucket_starts(time_range: TimeRange, today: date) -> list[date]:
    """First local date of every bucket, oldest first."""
    time_range = TimeRange(time_range)
    count = BUCKET_COUNTS[time_range]
    if time_range == TimeRange.DAYS:
        return [today - timedelta(days=i) for i in range(count - 1, -1, -1)]
    if time_range == TimeRange.WEEKS:
        this_week = _week_start(today)
        return [this_week - timedelta(weeks=i) for i in range(count - 1, -1, -1)]
    this_month = today.replace(day=1)
    return [_add_months(this_month, -i) for i in range(count - 1, -1, -1)]


def window_start(time_range: TimeRange, today: date) -> date:
    """Earliest local date that falls in any bucket."""
    return bucket_starts(time_range, today)[0]


def _bucket_key(time_range: TimeRange, d: date) -> date:
    if time_range == TimeRange.DAYS:
        return d
    if time_range == TimeRange.WEEKS:
        return _week_start(d)
    return d.replace(day=1)


def _record_fields(record: Any) -> tuple[Any, Any]:
    if isinstance(record, Mapping):
        return record.get("date"), record.get("volume")
    return getattr(record, "date", None), getattr(record, "volume", None)


def _clamp_volume(volume: Any) -> float:
    if volume is None:
        return 0.0
    v = float(volume)
    return v if v > 0 else 0.0


def bucket(
    records: Iterable[Any],
    time_range: TimeRange,
    now: datetime,
    local_offset_minutes: int = 0,
) -> list[VolumeBucket]:
    """
    Aggregate daily volume records into a fixed-length series of labelled buckets.

    records: DailyVolume rows, DailyVolumeRecord schemas or {"date", "volume"} mappings.
    Records whose local date is outside every bucket are dropped; duplicates are
    summed; negative or missing volume counts as zero.
    """
    time_range = TimeRange(time_range)
    today = local_today(now, local_offset_minutes)
    starts = bucket_starts(time_range, today)
    totals: dict[date, float] = {start: 0.0 for start in starts}

    for record in records:
        raw_date, raw_volume = _record_fields(record)
        if raw_date is None:
            raise ValueError("volume record has no date")
        key = _bucket_key(time_range, local_date(raw_date, local_offset_minutes))
        if key in totals:
            totals[key] += _clamp_volume(raw_volume)

    label = _month_label if time_range == TimeRange.MONTHS else _day_label
    return [VolumeBucket(label=label(start), volume=totals[start]) for start in starts]
