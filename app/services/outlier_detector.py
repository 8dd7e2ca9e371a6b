"""Velocity z-scores and outlier flags across one search corpus."""
from typing import List

import numpy as np

from app.core.exceptions import ValidationError
from app.models.analysis import OutlierAnalysis
from app.models.video import VideoRecord
from app.utils.numbers import round_half_up

OUTLIER_Z_THRESHOLD = 2.0
TOP_OUTLIER_COUNT = 5


class StatisticalOutlierDetector:
    """Flags videos whose velocity sits more than two deviations above the mean.

    The corpus is the full population being judged, not a sample of a larger
    one, so the deviation uses divisor N (``ddof=0``).
    """

    def __init__(self, threshold: float = OUTLIER_Z_THRESHOLD, top_count: int = TOP_OUTLIER_COUNT):
        self.threshold = threshold
        self.top_count = top_count

    def detect(self, videos: List[VideoRecord]) -> OutlierAnalysis:
        if not videos:
            raise ValidationError("Outlier detection needs at least one video")

        velocities = np.array([video.velocity for video in videos], dtype=float)
        mean = float(np.mean(velocities))
        std_dev = float(np.std(velocities))

        scored = [self._score(video, mean, std_dev) for video in videos]

        # sorted() is stable, so equal z-scores keep corpus order
        ranked = sorted(scored, key=lambda video: video.z_score, reverse=True)

        return OutlierAnalysis(
            videos=scored,
            ranked=ranked,
            top_outliers=ranked[:self.top_count],
            outliers=[video for video in scored if video.is_outlier],
            mean_velocity=mean,
            velocity_std_dev=std_dev,
        )

    def _score(self, video: VideoRecord, mean: float, std_dev: float) -> VideoRecord:
        raw_z = (video.velocity - mean) / std_dev if std_dev > 0 else 0.0

        # The flag uses the raw z; the rounded value is for display
        return video.model_copy(update={
            "z_score": round_half_up(raw_z, 2),
            "is_outlier": raw_z > self.threshold,
        })
