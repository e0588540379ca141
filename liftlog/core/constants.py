"""Application constants."""

from liftlog.core.enums import TimeRange

# Session limits (workout builder)
MAX_EXERCISES_PER_SESSION = 20
MAX_SETS_PER_EXERCISE_PER_SESSION = 10

# Volume dashboard: days of daily_volume rows fetched per range, and buckets emitted
LOOKBACK_DAYS = {
    TimeRange.DAYS: 7,
    TimeRange.WEEKS: 56,
    TimeRange.MONTHS: 365,
}
BUCKET_COUNTS = {
    TimeRange.DAYS: 7,
    TimeRange.WEEKS: 8,
    TimeRange.MONTHS: 12,
}

# Viewer timezone offsets accepted by the API (UTC-14:00 .. UTC+14:00)
MIN_TZ_OFFSET_MINUTES = -14 * 60
MAX_TZ_OFFSET_MINUTES = 14 * 60
