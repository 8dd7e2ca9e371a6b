"""Turns raw video resources into analyzable records."""
import math
import re
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.models.video import DurationCategory, VideoRecord
from app.models.youtube import VideoResource
from app.utils.numbers import round_int

ISO_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")

# Upper bounds in seconds, exclusive; anything beyond the last is Very Long
DURATION_THRESHOLDS = [
    (60, DurationCategory.SHORTS),
    (300, DurationCategory.SHORT),
    (600, DurationCategory.MEDIUM),
    (1200, DurationCategory.LONG),
]

SECONDS_PER_DAY = 86400


def parse_duration(iso_duration: str) -> int:
    """Parse a ``PT#H#M#S`` duration into seconds; unparseable input yields 0."""
    match = ISO_DURATION_PATTERN.search(iso_duration or "")
    if not match:
        return 0

    hours, minutes, seconds = (int(part) if part else 0 for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def categorize_duration(seconds: int) -> DurationCategory:
    for upper_bound, category in DURATION_THRESHOLDS:
        if seconds < upper_bound:
            return category
    return DurationCategory.VERY_LONG


def days_since_publish(published_at: datetime, now: datetime) -> int:
    """Whole days since publication, never less than 1."""
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    elapsed = (now - published_at).total_seconds()
    return max(1, math.floor(elapsed / SECONDS_PER_DAY))


def compute_velocity(views: int, days: int) -> int:
    return round_int(views / max(1, days))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VideoRecordNormalizer:
    """Builds ``VideoRecord`` objects with duration category and view velocity."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or utc_now

    def normalize(self, resources: List[VideoResource]) -> List[VideoRecord]:
        now = self.clock()
        return [self.normalize_one(resource, now) for resource in resources]

    def normalize_one(self, resource: VideoResource, now: datetime) -> VideoRecord:
        snippet = resource.snippet
        duration_seconds = parse_duration(resource.content_details.duration)
        views = resource.statistics.view_count or 0
        days = days_since_publish(snippet.published_at, now)

        return VideoRecord(
            id=resource.id,
            title=snippet.title,
            channel_id=snippet.channel_id,
            channel_title=snippet.channel_title,
            published_at=snippet.published_at,
            views=views,
            thumbnail=snippet.thumbnails.high.url if snippet.thumbnails.high else "",
            duration_seconds=duration_seconds,
            duration_category=categorize_duration(duration_seconds),
            days_since_publish=days,
            velocity=compute_velocity(views, days),
        )
