"""Unit tests for SaturationScorer and ConfidenceScorer."""
import pytest

from app.models.analysis import AssessmentLevel, PatternInsights
from app.services.scoring import (
    ConfidenceScorer, SaturationScorer, channel_concentration, mean_age_days
)


def make_patterns(numbers=0, questions=0, caps=0, emoji=0):
    return PatternInsights(
        uses_numbers=numbers,
        uses_questions=questions,
        uses_emoji=emoji,
        uses_all_caps=caps,
        average_title_length=40,
        based_on=5,
        source="outliers",
    )


class TestSaturationScorer:
    """Test the saturation composite."""

    @pytest.fixture
    def scorer(self):
        return SaturationScorer()

    def test_single_old_channel_corpus_is_high(self, scorer, make_video):
        videos = [make_video(video_id=f"v{i}", channel_id="solo", days=400) for i in range(50)]

        assessment = scorer.score(videos)

        assert assessment.score == 99
        assert assessment.label == AssessmentLevel.HIGH
        assert assessment.factors.competition == 100
        assert assessment.factors.channel_concentration == 98
        assert assessment.factors.content_age == 100

    def test_small_fresh_diverse_corpus_is_low(self, scorer, make_video):
        videos = [make_video(video_id=f"v{i}", channel_id=f"c{i}", days=1) for i in range(10)]

        assessment = scorer.score(videos)

        assert assessment.score == 8
        assert assessment.label == AssessmentLevel.LOW
        assert assessment.factors.competition == 20
        assert assessment.factors.channel_concentration == 0
        assert assessment.factors.content_age == 0

    @pytest.mark.parametrize("score,label", [
        (0, AssessmentLevel.LOW),
        (30, AssessmentLevel.LOW),
        (31, AssessmentLevel.MEDIUM),
        (60, AssessmentLevel.MEDIUM),
        (61, AssessmentLevel.HIGH),
        (100, AssessmentLevel.HIGH),
    ])
    def test_label_boundaries(self, score, label):
        assert SaturationScorer.label_for(score) == label

    def test_helpers(self, make_video):
        videos = [
            make_video(channel_id="a", days=10),
            make_video(channel_id="a", days=20),
            make_video(channel_id="b", days=30),
            make_video(channel_id="c", days=40),
        ]

        assert channel_concentration(videos) == pytest.approx(0.25)
        assert mean_age_days(videos) == pytest.approx(25.0)
        assert channel_concentration([]) == 0.0


class TestConfidenceScorer:
    """Test the additive confidence score."""

    @pytest.fixture
    def scorer(self):
        return ConfidenceScorer()

    def test_strong_signals(self, scorer):
        assessment = scorer.score(50, 5, make_patterns(numbers=60))

        assert assessment.score == 90
        assert assessment.level == AssessmentLevel.HIGH
        assert assessment.factors == [
            "Strong sample size (40+ videos)",
            "Clear outlier pattern (5+ outliers)",
            "Clear title pattern dominance",
        ]

    def test_weak_signals(self, scorer):
        assessment = scorer.score(10, 0, make_patterns())

        assert assessment.score == 35
        assert assessment.level == AssessmentLevel.LOW
        assert assessment.factors == ["Limited sample size", "Few statistical outliers"]

    def test_moderate_signals(self, scorer):
        assessment = scorer.score(30, 3, make_patterns(questions=45))

        assert assessment.score == 73
        assert assessment.level == AssessmentLevel.MEDIUM
        assert assessment.factors == [
            "Good sample size (25+ videos)",
            "Some outliers found",
            "Moderate pattern clarity",
        ]

    def test_emoji_does_not_count_toward_pattern_clarity(self, scorer):
        assessment = scorer.score(40, 5, make_patterns(emoji=100))

        assert assessment.score == 80
        assert "Clear title pattern dominance" not in assessment.factors

    @pytest.mark.parametrize("sample,outliers,patterns", [
        (0, 0, 0), (10, 1, 39), (25, 2, 40), (40, 5, 60), (1000, 1000, 100),
    ])
    def test_score_stays_in_range(self, scorer, sample, outliers, patterns):
        assessment = scorer.score(sample, outliers, make_patterns(numbers=patterns))

        assert 20 <= assessment.score <= 95

    @pytest.mark.parametrize("score,level", [
        (75, AssessmentLevel.HIGH),
        (74, AssessmentLevel.MEDIUM),
        (50, AssessmentLevel.MEDIUM),
        (49, AssessmentLevel.LOW),
    ])
    def test_level_boundaries(self, score, level):
        assert ConfidenceScorer.level_for(score) == level
