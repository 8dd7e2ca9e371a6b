"""Unit tests for VideoRecordNormalizer and its helpers."""
from datetime import datetime, timedelta, timezone

import pytest

from app.models.video import DurationCategory
from app.models.youtube import VideoResource
from app.services.normalizer import (
    VideoRecordNormalizer, categorize_duration, compute_velocity,
    days_since_publish, parse_duration
)


class TestParseDuration:
    """Test ISO 8601 duration parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT10M", 600),
        ("PT2H", 7200),
        ("PT1H30S", 3630),
    ])
    def test_parses_components(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "garbage", "P1D", None])
    def test_unparseable_is_zero(self, value):
        assert parse_duration(value) == 0


class TestCategorizeDuration:
    """Test the left-inclusive category thresholds."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, DurationCategory.SHORTS),
        (59, DurationCategory.SHORTS),
        (60, DurationCategory.SHORT),
        (299, DurationCategory.SHORT),
        (300, DurationCategory.MEDIUM),
        (599, DurationCategory.MEDIUM),
        (600, DurationCategory.LONG),
        (1199, DurationCategory.LONG),
        (1200, DurationCategory.VERY_LONG),
        (36000, DurationCategory.VERY_LONG),
    ])
    def test_boundaries(self, seconds, expected):
        assert categorize_duration(seconds) == expected

    def test_range_labels(self):
        assert DurationCategory.SHORTS.range_label == "Shorts (<1 min)"
        assert DurationCategory.VERY_LONG.range_label == "Very Long (>20 min)"


class TestDaysAndVelocity:
    """Test day counting and velocity rounding."""

    def test_same_instant_counts_as_one_day(self, frozen_now):
        assert days_since_publish(frozen_now, frozen_now) == 1

    def test_partial_day_floors_to_one(self, frozen_now):
        assert days_since_publish(frozen_now - timedelta(hours=12), frozen_now) == 1

    def test_future_publish_date_is_one(self, frozen_now):
        assert days_since_publish(frozen_now + timedelta(days=3), frozen_now) == 1

    def test_whole_days(self, frozen_now):
        assert days_since_publish(frozen_now - timedelta(days=10, hours=23), frozen_now) == 10

    def test_naive_datetime_treated_as_utc(self, frozen_now):
        naive = datetime(2024, 5, 22)
        assert days_since_publish(naive, frozen_now) == 10

    def test_velocity_rounds_half_up(self):
        assert compute_velocity(1000, 10) == 100
        assert compute_velocity(25, 10) == 3
        assert compute_velocity(14, 10) == 1

    def test_velocity_guards_zero_days(self):
        assert compute_velocity(500, 0) == 500


class TestVideoRecordNormalizer:
    """Test conversion of raw resources into records."""

    @pytest.fixture
    def normalizer(self, frozen_now):
        return VideoRecordNormalizer(clock=lambda: frozen_now)

    def test_normalize_full_resource(self, normalizer, make_resource):
        resource = make_resource(video_id="abc", views=5000, duration="PT4M30S", days=10)

        record = normalizer.normalize([resource])[0]

        assert record.id == "abc"
        assert record.views == 5000
        assert record.duration_seconds == 270
        assert record.duration_category == DurationCategory.SHORT
        assert record.days_since_publish == 10
        assert record.velocity == 500
        assert record.thumbnail == "https://i.ytimg.com/vi/abc/hqdefault.jpg"
        assert record.z_score == 0.0
        assert record.is_outlier is False

    def test_missing_statistics_and_thumbnail(self, normalizer, frozen_now):
        resource = VideoResource.model_validate({
            "id": "bare",
            "snippet": {
                "title": "No stats",
                "channelId": "c1",
                "publishedAt": "2024-05-01T00:00:00Z",
            },
        })

        record = normalizer.normalize_one(resource, frozen_now)

        assert record.views == 0
        assert record.velocity == 0
        assert record.thumbnail == ""
        assert record.duration_seconds == 0
        assert record.duration_category == DurationCategory.SHORTS
        assert record.days_since_publish == 31

    def test_uses_single_clock_reading(self, make_resource):
        readings = []

        def clock():
            readings.append(1)
            return datetime(2024, 6, 1, tzinfo=timezone.utc)

        VideoRecordNormalizer(clock=clock).normalize([make_resource(), make_resource()])

        assert len(readings) == 1
