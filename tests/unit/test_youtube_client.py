"""Unit tests for YouTubeClient payload handling."""
from unittest.mock import AsyncMock, patch

import pytest

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, UpstreamSchemaError
from app.services.youtube_client import YouTubeClient


def make_client(api_key="yt-test"):
    settings = Settings()
    settings.youtube_api_key = api_key
    settings.search_max_results = 50
    return YouTubeClient(settings)


class TestYouTubeClient:
    """Test request parameters and schema validation."""

    @pytest.mark.asyncio
    async def test_search_returns_ids_in_order(self):
        client = make_client()
        payload = {"items": [
            {"id": {"kind": "youtube#video", "videoId": "a1"}},
            {"id": {"kind": "youtube#video", "videoId": "b2"}},
        ]}

        with patch.object(client, "_get_json", AsyncMock(return_value=payload)) as mock_get:
            ids = await client.search_video_ids("sourdough", "GB")

        assert ids == ["a1", "b2"]
        endpoint, params = mock_get.call_args.args
        assert endpoint == "search"
        assert params == {
            "part": "snippet",
            "q": "sourdough",
            "type": "video",
            "maxResults": 50,
            "regionCode": "GB",
        }

    @pytest.mark.asyncio
    async def test_search_limit_never_exceeds_setting(self):
        client = make_client()

        with patch.object(client, "_get_json", AsyncMock(return_value={"items": []})) as mock_get:
            await client.search_video_ids("sourdough", "US", max_results=25)
            await client.search_video_ids("sourdough", "US", max_results=500)

        limits = [call.args[1]["maxResults"] for call in mock_get.call_args_list]
        assert limits == [25, 50]

    @pytest.mark.asyncio
    async def test_search_without_items_is_empty(self):
        client = make_client()

        with patch.object(client, "_get_json", AsyncMock(return_value={"kind": "youtube#searchListResponse"})):
            assert await client.search_video_ids("nothing", "US") == []

    @pytest.mark.asyncio
    async def test_malformed_search_payload(self):
        client = make_client()

        with patch.object(client, "_get_json", AsyncMock(return_value={"items": [{"id": {}}]})):
            with pytest.raises(UpstreamSchemaError) as exc_info:
                await client.search_video_ids("sourdough", "US")

        assert exc_info.value.error_code == "UPSTREAM_SCHEMA_ERROR"
        assert exc_info.value.details["endpoint"] == "search"

    @pytest.mark.asyncio
    async def test_get_videos_joins_ids(self):
        client = make_client()
        payload = {"items": [{
            "id": "a1",
            "snippet": {"title": "T", "channelId": "c", "publishedAt": "2024-01-01T00:00:00Z"},
            "contentDetails": {"duration": "PT5M"},
            "statistics": {"viewCount": "42"},
        }]}

        with patch.object(client, "_get_json", AsyncMock(return_value=payload)) as mock_get:
            resources = await client.get_videos(["a1", "b2"])

        assert resources[0].statistics.view_count == 42
        endpoint, params = mock_get.call_args.args
        assert endpoint == "videos"
        assert params == {"part": "snippet,contentDetails,statistics", "id": "a1,b2"}

    @pytest.mark.asyncio
    async def test_malformed_videos_payload(self):
        client = make_client()
        payload = {"items": [{"id": "a1", "snippet": {"title": "No channel"}}]}

        with patch.object(client, "_get_json", AsyncMock(return_value=payload)):
            with pytest.raises(UpstreamSchemaError):
                await client.get_videos(["a1"])

    @pytest.mark.asyncio
    async def test_get_videos_with_no_ids_skips_request(self):
        client = make_client()

        with patch.object(client, "_get_json", AsyncMock()) as mock_get:
            assert await client.get_videos([]) == []

        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        client = make_client(api_key="")

        with pytest.raises(ConfigurationError) as exc_info:
            await client.search_video_ids("sourdough", "US")

        assert exc_info.value.details["setting"] == "YOUTUBE_API_KEY"
