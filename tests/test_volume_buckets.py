"""Tests for bucketing daily volume into local days, weeks and months."""

from datetime import date, datetime, timezone

import pytest

from liftlog.core.enums import TimeRange
from liftlog.models.daily_volume import DailyVolume
from liftlog.schemas.volume import DailyVolumeRecord
from liftlog.services.volume_buckets import (
    bucket,
    bucket_starts,
    local_date,
    local_today,
    lookback_days,
    window_start,
)

# Sunday, mid-day UTC
NOW = datetime(2023, 10, 15, 12, 0, tzinfo=timezone.utc)


def volumes(buckets):
    return [b.volume for b in buckets]


def labels(buckets):
    return [b.label for b in buckets]


class TestBucketLengths:
    @pytest.mark.parametrize(
        "time_range,expected",
        [(TimeRange.DAYS, 7), (TimeRange.WEEKS, 8), (TimeRange.MONTHS, 12)],
    )
    def test_empty_records_still_fill_every_bucket(self, time_range, expected):
        result = bucket([], time_range, NOW, 0)
        assert len(result) == expected
        assert all(b.volume == 0 for b in result)

    def test_accepts_range_value_strings(self):
        assert len(bucket([], "8weeks", NOW)) == 8

    def test_lookback_days(self):
        assert lookback_days(TimeRange.DAYS) == 7
        assert lookback_days(TimeRange.WEEKS) == 56
        assert lookback_days(TimeRange.MONTHS) == 365


class TestDays:
    def test_labels_end_on_local_today(self):
        result = bucket([], TimeRange.DAYS, NOW, 0)
        assert labels(result) == ["Oct 9", "Oct 10", "Oct 11", "Oct 12", "Oct 13", "Oct 14", "Oct 15"]

    def test_window_boundary(self):
        records = [
            {"date": "2023-10-09", "volume": 100},  # today - 6, the oldest of the 7 daily buckets
            {"date": "2023-10-08", "volume": 999},  # today - 7, before the first bucket
            {"date": "2023-10-15", "volume": 50},
        ]
        result = bucket(records, TimeRange.DAYS, NOW, 0)
        assert result[0].volume == 100
        assert result[-1].volume == 50
        assert sum(volumes(result)) == 150

    def test_duplicates_are_summed(self):
        records = [
            {"date": "2023-10-12", "volume": 100},
            {"date": "2023-10-12", "volume": 25.5},
        ]
        result = bucket(records, TimeRange.DAYS, NOW, 0)
        assert result[3].label == "Oct 12"
        assert result[3].volume == 125.5

    def test_negative_and_missing_volume_count_as_zero(self):
        records = [
            {"date": "2023-10-14", "volume": -40},
            {"date": "2023-10-14", "volume": None},
            {"date": "2023-10-14"},
            {"date": "2023-10-14", "volume": 10},
        ]
        result = bucket(records, TimeRange.DAYS, NOW, 0)
        assert result[5].volume == 10

    def test_future_records_are_dropped(self):
        result = bucket([{"date": "2023-10-16", "volume": 80}], TimeRange.DAYS, NOW, 0)
        assert sum(volumes(result)) == 0


class TestTimezoneShift:
    def test_negative_offset_moves_record_to_previous_local_day(self):
        result = bucket([{"date": "2023-10-15", "volume": 300}], TimeRange.DAYS, NOW, -300)
        by_label = {b.label: b.volume for b in result}
        assert by_label["Oct 14"] == 300
        assert by_label["Oct 15"] == 0

    def test_positive_offset_keeps_the_same_day(self):
        result = bucket([{"date": "2023-10-15", "volume": 300}], TimeRange.DAYS, NOW, 330)
        assert result[-1].label == "Oct 15"
        assert result[-1].volume == 300

    def test_local_today_follows_offset(self):
        late_utc = datetime(2023, 10, 15, 23, 30, tzinfo=timezone.utc)
        assert local_today(late_utc, 60) == date(2023, 10, 16)
        assert local_today(late_utc, -60) == date(2023, 10, 15)
        early_utc = datetime(2023, 10, 15, 2, 0, tzinfo=timezone.utc)
        assert local_today(early_utc, -300) == date(2023, 10, 14)

    def test_naive_now_is_utc(self):
        assert local_today(datetime(2023, 10, 15, 12, 0), 0) == date(2023, 10, 15)

    def test_local_date_of_stored_utc_date(self):
        assert local_date("2023-10-15", -300) == date(2023, 10, 14)
        assert local_date(date(2023, 10, 15), 0) == date(2023, 10, 15)
        assert local_date(date(2023, 10, 15), 840) == date(2023, 10, 15)

    def test_record_can_fall_out_of_the_window_after_shifting(self):
        # Oct 9 UTC is Oct 8 locally at UTC-5, one day before the oldest bucket
        result = bucket([{"date": "2023-10-09", "volume": 70}], TimeRange.DAYS, NOW, -300)
        assert sum(volumes(result)) == 0


class TestWeeks:
    def test_weeks_start_on_monday(self):
        result = bucket([], TimeRange.WEEKS, NOW, 0)
        assert labels(result) == [
            "Aug 21", "Aug 28", "Sep 4", "Sep 11", "Sep 18", "Sep 25", "Oct 2", "Oct 9",
        ]

    def test_records_land_in_their_week(self):
        records = [
            {"date": "2023-10-09", "volume": 10},  # Monday
            {"date": "2023-10-15", "volume": 20},  # Sunday, same week
            {"date": "2023-10-08", "volume": 5},  # Sunday, previous week
            {"date": "2023-08-21", "volume": 1},  # oldest Monday
            {"date": "2023-08-20", "volume": 1000},  # before the window
        ]
        result = bucket(records, TimeRange.WEEKS, NOW, 0)
        assert result[-1].volume == 30
        assert result[-2].volume == 5
        assert result[0].volume == 1
        assert sum(volumes(result)) == 36

    def test_window_start_is_oldest_monday(self):
        assert window_start(TimeRange.WEEKS, date(2023, 10, 15)) == date(2023, 8, 21)


class TestMonths:
    def test_twelve_calendar_months(self):
        result = bucket([], TimeRange.MONTHS, NOW, 0)
        assert result[0].label == "Nov 22"
        assert result[-1].label == "Oct 23"

    def test_records_sum_by_month(self):
        records = [
            {"date": "2023-10-01", "volume": 100},
            {"date": "2023-10-15", "volume": 50},
            {"date": "2022-11-01", "volume": 7},
            {"date": "2022-10-31", "volume": 500},
        ]
        result = bucket(records, TimeRange.MONTHS, NOW, 0)
        assert result[-1].volume == 150
        assert result[0].volume == 7
        assert sum(volumes(result)) == 157

    def test_year_rollover_with_offset(self):
        now = datetime(2024, 1, 1, 2, 0, tzinfo=timezone.utc)
        result = bucket([{"date": "2024-01-01", "volume": 40}], TimeRange.MONTHS, now, -300)
        assert result[-1].label == "Dec 23"
        assert result[0].label == "Jan 23"
        assert result[-1].volume == 40

    def test_bucket_starts_are_month_firsts(self):
        starts = bucket_starts(TimeRange.MONTHS, date(2024, 3, 31))
        assert starts[0] == date(2023, 4, 1)
        assert starts[-1] == date(2024, 3, 1)
        assert all(s.day == 1 for s in starts)


class TestRecordShapes:
    def test_schema_orm_and_mapping_records(self):
        records = [
            DailyVolumeRecord(date=date(2023, 10, 13), volume=10),
            DailyVolume(date=date(2023, 10, 13), volume=20.0),
            {"date": date(2023, 10, 13), "volume": 30},
        ]
        result = bucket(records, TimeRange.DAYS, NOW, 0)
        assert result[4].volume == 60

    @pytest.mark.parametrize("bad", ["2023-13-45", "not-a-date", "15/10/2023"])
    def test_malformed_date_raises(self, bad):
        with pytest.raises(ValueError):
            bucket([{"date": bad, "volume": 10}], TimeRange.DAYS, NOW, 0)

    def test_missing_date_raises(self):
        with pytest.raises(ValueError):
            bucket([{"volume": 10}], TimeRange.DAYS, NOW, 0)

    def test_input_is_not_mutated(self):
        records = [{"date": "2023-10-15", "volume": -5}]
        bucket(records, TimeRange.DAYS, NOW, 0)
        assert records == [{"date": "2023-10-15", "volume": -5}]
