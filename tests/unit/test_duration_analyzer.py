"""Unit tests for DurationGapAnalyzer."""
import pytest

from app.models.analysis import RecommendedBucket
from app.models.video import DurationCategory
from app.services.duration_analyzer import DurationGapAnalyzer, describe_recommendation

SHORTS, SHORT, MEDIUM, LONG = 30, 120, 480, 900


class TestDurationGapAnalyzer:
    """Test bucket aggregation and gap selection."""

    @pytest.fixture
    def analyzer(self):
        return DurationGapAnalyzer()

    def test_aggregate_returns_all_categories_in_order(self, analyzer, make_video):
        videos = [
            make_video(views=100, duration_seconds=MEDIUM),
            make_video(views=201, duration_seconds=MEDIUM),
            make_video(views=50, duration_seconds=SHORTS),
        ]

        buckets = analyzer.aggregate(videos)

        assert [bucket.category for bucket in buckets] == DurationCategory.canonical_order()
        medium = buckets[2]
        assert medium.count == 2
        assert medium.total_views == 301
        assert medium.average_views == 151
        assert buckets[3].count == 0
        assert buckets[3].average_views == 0

    def test_gap_is_sticky_against_higher_plain_multiplier(self, analyzer, make_video):
        videos = [make_video(views=2000, duration_seconds=SHORTS)]
        videos += [make_video(views=100, duration_seconds=SHORT) for _ in range(5)]
        videos += [make_video(views=3000, duration_seconds=MEDIUM) for _ in range(4)]

        recommended, _ = analyzer.analyze(videos)

        assert recommended.category == DurationCategory.SHORTS
        assert recommended.is_gap is True
        assert recommended.multiplier == 1.4
        assert recommended.sample_size == 1
        assert recommended.average_views == 2000

    def test_later_gap_with_higher_multiplier_wins(self, analyzer, make_video):
        videos = [make_video(views=2000, duration_seconds=SHORTS)]
        videos += [make_video(views=100, duration_seconds=SHORT) for _ in range(8)]
        videos.append(make_video(views=5000, duration_seconds=LONG))

        recommended, _ = analyzer.analyze(videos)

        assert recommended.category == DurationCategory.LONG
        assert recommended.is_gap is True
        assert recommended.multiplier == 6.4

    def test_later_category_competes_with_rounded_multiplier(self, analyzer, make_video):
        videos = [make_video(views=104, duration_seconds=SHORTS) for _ in range(4)]
        videos += [make_video(views=102, duration_seconds=SHORT) for _ in range(4)]
        videos += [make_video(views=88, duration_seconds=MEDIUM) for _ in range(2)]

        recommended, _ = analyzer.analyze(videos)

        assert recommended.category == DurationCategory.SHORT
        assert recommended.is_gap is False
        assert recommended.multiplier == 1.0
        assert recommended.sample_size == 4

    def test_single_category_corpus(self, analyzer, make_video):
        videos = [make_video(views=v, duration_seconds=MEDIUM) for v in (100, 200, 300, 400, 500)]

        recommended, _ = analyzer.analyze(videos)

        assert recommended.category == DurationCategory.MEDIUM
        assert recommended.is_gap is False
        assert recommended.multiplier == 1.0

    def test_zero_views_gives_empty_recommendation(self, analyzer, make_video):
        videos = [make_video(views=0, velocity=0, duration_seconds=d) for d in (SHORTS, MEDIUM, LONG)]

        recommended, _ = analyzer.analyze(videos)

        assert recommended.is_empty
        assert recommended.multiplier == 0.0
        assert recommended.is_gap is False

    def test_empty_corpus(self, analyzer):
        recommended, buckets = analyzer.analyze([])

        assert recommended.is_empty
        assert len(buckets) == 5


class TestDescribeRecommendation:
    """Test the rationale sentence."""

    def test_empty(self):
        assert describe_recommendation(RecommendedBucket(), 10) == "No length category stands out in these results."

    def test_gap(self):
        bucket = RecommendedBucket(
            category=DurationCategory.LONG, multiplier=2.5, average_views=500, sample_size=2, is_gap=True
        )

        text = describe_recommendation(bucket, 40)

        assert text == "Long (10-20 min) is under-served (2 of 40 results) yet averages 2.5x the typical views."

    def test_plain(self):
        bucket = RecommendedBucket(category=DurationCategory.MEDIUM, multiplier=1.2, average_views=500, sample_size=9)

        assert describe_recommendation(bucket, 40) == "Medium (5-10 min) videos average 1.2x the views of the typical result."
