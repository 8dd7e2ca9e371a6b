"""Finds the length niche with the best demand relative to its supply."""
from typing import Dict, List, Tuple

import numpy as np

from app.models.analysis import DurationBucket, RecommendedBucket
from app.models.video import DurationCategory, VideoRecord
from app.utils.numbers import round_half_up, round_int

UNDERSERVED_RATIO = 0.7
DEMAND_RATIO = 0.8


class DurationGapAnalyzer:
    """Recommends one duration category for a corpus.

    Categories are scanned in canonical order. A gap candidate (under-served
    yet in demand) replaces the current best when its multiplier is higher;
    a plain candidate may only replace a best that is not already a gap.
    Once a gap is chosen, later non-gap categories cannot displace it.
    """

    def aggregate(self, videos: List[VideoRecord]) -> List[DurationBucket]:
        buckets: Dict[DurationCategory, DurationBucket] = {
            category: DurationBucket(category=category)
            for category in DurationCategory.canonical_order()
        }

        for video in videos:
            bucket = buckets[video.duration_category]
            bucket.count += 1
            bucket.total_views += video.views

        for bucket in buckets.values():
            if bucket.count > 0:
                bucket.average_views = round_int(bucket.total_views / bucket.count)

        return list(buckets.values())

    def analyze(self, videos: List[VideoRecord]) -> Tuple[RecommendedBucket, List[DurationBucket]]:
        buckets = self.aggregate(videos)
        if not videos:
            return RecommendedBucket(), buckets

        corpus_average = float(np.mean([video.views for video in videos]))
        average_count = len(videos) / len(buckets)

        # Later categories compete against the rounded multiplier of the best so far
        best = RecommendedBucket()

        for bucket in buckets:
            if bucket.count == 0:
                continue

            multiplier = bucket.average_views / corpus_average if corpus_average > 0 else 0.0
            is_underserved = bucket.count < UNDERSERVED_RATIO * average_count
            has_demand = bucket.average_views >= DEMAND_RATIO * corpus_average

            if is_underserved and has_demand and multiplier > best.multiplier:
                best = self._candidate(bucket, multiplier, is_gap=True)
            elif not best.is_gap and multiplier > best.multiplier:
                best = self._candidate(bucket, multiplier, is_gap=False)

        return best, buckets

    @staticmethod
    def _candidate(bucket: DurationBucket, multiplier: float, is_gap: bool) -> RecommendedBucket:
        return RecommendedBucket(
            category=bucket.category,
            multiplier=round_half_up(multiplier, 1),
            average_views=bucket.average_views,
            sample_size=bucket.count,
            is_gap=is_gap,
        )


def describe_recommendation(recommended: RecommendedBucket, total_videos: int) -> str:
    """One-sentence rationale for the recommended length."""
    if recommended.is_empty:
        return "No length category stands out in these results."

    label = recommended.category.range_label
    if recommended.is_gap:
        return (
            f"{label} is under-served ({recommended.sample_size} of {total_videos} results) "
            f"yet averages {recommended.multiplier}x the typical views."
        )
    return f"{label} videos average {recommended.multiplier}x the views of the typical result."
