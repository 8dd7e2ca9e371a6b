"""Composite 0-100 scores for topic saturation and analysis confidence."""
from typing import List

import numpy as np

from app.models.analysis import (
    AssessmentLevel, ConfidenceAssessment, PatternInsights,
    SaturationAssessment, SaturationFactors
)
from app.models.video import VideoRecord
from app.utils.numbers import round_int

RESULT_CAP = 50
DAYS_PER_YEAR = 365


def channel_concentration(videos: List[VideoRecord]) -> float:
    """0 when every result comes from a different channel, near 1 when one channel owns them all."""
    if not videos:
        return 0.0
    distinct_channels = len({video.channel_id for video in videos})
    return 1 - distinct_channels / len(videos)


def mean_age_days(videos: List[VideoRecord]) -> float:
    if not videos:
        return 0.0
    return float(np.mean([video.days_since_publish for video in videos]))


class SaturationScorer:
    """Weighs competition density, channel concentration and content age."""

    COMPETITION_WEIGHT = 0.4
    CONCENTRATION_WEIGHT = 0.3
    AGE_WEIGHT = 0.3

    def score(self, videos: List[VideoRecord]) -> SaturationAssessment:
        competition = min(len(videos) / RESULT_CAP, 1.0)
        concentration = channel_concentration(videos)
        age = min(mean_age_days(videos) / DAYS_PER_YEAR, 1.0)

        raw = (
            self.COMPETITION_WEIGHT * competition
            + self.CONCENTRATION_WEIGHT * concentration
            + self.AGE_WEIGHT * age
        )
        score = round_int(raw * 100)

        return SaturationAssessment(
            score=score,
            label=self.label_for(score),
            factors=SaturationFactors(
                competition=round_int(competition * 100),
                channel_concentration=round_int(concentration * 100),
                content_age=round_int(age * 100),
            ),
        )

    @staticmethod
    def label_for(score: int) -> AssessmentLevel:
        if score <= 30:
            return AssessmentLevel.LOW
        if score <= 60:
            return AssessmentLevel.MEDIUM
        return AssessmentLevel.HIGH


class ConfidenceScorer:
    """Additive confidence score from sample size, outlier count and pattern clarity."""

    BASE_SCORE = 50
    MIN_SCORE = 20
    MAX_SCORE = 95

    def score(self, sample_size: int, outlier_count: int, patterns: PatternInsights) -> ConfidenceAssessment:
        score = self.BASE_SCORE
        factors = []

        if sample_size >= 40:
            score += 15
            factors.append("Strong sample size (40+ videos)")
        elif sample_size >= 25:
            score += 10
            factors.append("Good sample size (25+ videos)")
        else:
            score -= 10
            factors.append("Limited sample size")

        if outlier_count >= 5:
            score += 15
            factors.append("Clear outlier pattern (5+ outliers)")
        elif outlier_count >= 2:
            score += 8
            factors.append("Some outliers found")
        else:
            score -= 5
            factors.append("Few statistical outliers")

        max_pattern = max(patterns.uses_numbers, patterns.uses_questions, patterns.uses_all_caps)
        if max_pattern >= 60:
            score += 10
            factors.append("Clear title pattern dominance")
        elif max_pattern >= 40:
            score += 5
            factors.append("Moderate pattern clarity")

        score = max(self.MIN_SCORE, min(self.MAX_SCORE, score))

        return ConfidenceAssessment(score=score, level=self.level_for(score), factors=factors)

    @staticmethod
    def level_for(score: int) -> AssessmentLevel:
        if score >= 75:
            return AssessmentLevel.HIGH
        if score >= 50:
            return AssessmentLevel.MEDIUM
        return AssessmentLevel.LOW
