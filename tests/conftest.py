"""Shared fixtures for building corpora without touching the network."""
from datetime import datetime, timedelta, timezone

import pytest

from app.models.video import VideoRecord
from app.models.youtube import VideoResource
from app.services.normalizer import categorize_duration

FROZEN_NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now():
    """Fixed reference time for day counts."""
    return FROZEN_NOW


@pytest.fixture
def make_video():
    """Factory for analyzed records with sensible defaults."""
    def _make(
        video_id="vid",
        title="Sample video",
        views=1000,
        velocity=100,
        channel_id="channel",
        duration_seconds=480,
        days=10,
        thumbnail="",
    ):
        return VideoRecord(
            id=video_id,
            title=title,
            channel_id=channel_id,
            channel_title=channel_id.title(),
            published_at=FROZEN_NOW - timedelta(days=days),
            views=views,
            thumbnail=thumbnail,
            duration_seconds=duration_seconds,
            duration_category=categorize_duration(duration_seconds),
            days_since_publish=days,
            velocity=velocity,
        )
    return _make


@pytest.fixture
def make_resource():
    """Factory for raw ``videos.list`` items as the data API returns them."""
    def _make(
        video_id="vid",
        title="Sample video",
        views=1000,
        channel_id="channel",
        duration="PT8M",
        days=10,
    ):
        return VideoResource.model_validate({
            "id": video_id,
            "snippet": {
                "title": title,
                "channelId": channel_id,
                "channelTitle": channel_id.title(),
                "publishedAt": (FROZEN_NOW - timedelta(days=days)).isoformat().replace("+00:00", "Z"),
                "thumbnails": {"high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"}},
            },
            "contentDetails": {"duration": duration},
            "statistics": {"viewCount": str(views)},
        })
    return _make
