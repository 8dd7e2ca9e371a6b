"""YouTube Data API v3 client for corpus retrieval."""
import asyncio
import json
import re
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.exceptions import (
    ConfigurationError, ServiceUnavailableError, UpstreamHTTPError, UpstreamSchemaError
)
from app.models.youtube import SearchListResponse, VideoListResponse, VideoResource
from app.utils.logging import CorrelatedLogger

SUGGESTION_PATTERN = re.compile(r'\["([^"]+)"')


class YouTubeClient:
    """Thin async wrapper over the ``search`` and ``videos`` endpoints.

    Each call is attempted once. HTTP errors keep the upstream status and
    body; payloads are validated into typed models before use.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = CorrelatedLogger(__name__)

    def ensure_configured(self) -> None:
        """Raise if no API key is available for the data API."""
        if not self.settings.youtube_api_key:
            raise ConfigurationError("YOUTUBE_API_KEY", "YOUTUBE_API_KEY not configured")

    async def search_video_ids(
        self,
        query: str,
        region: str,
        max_results: Optional[int] = None
    ) -> List[str]:
        """Ids of the videos a search for ``query`` returns, in result order."""
        self.ensure_configured()
        limit = min(max_results or self.settings.search_max_results, self.settings.search_max_results)

        payload = await self._get_json("search", {
            "part": "snippet",
            "q": query,
            "type": "video",
            "maxResults": limit,
            "regionCode": region,
        })

        try:
            response = SearchListResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise UpstreamSchemaError("search", str(e))

        self.logger.info(f"Search for '{query}' ({region}) returned {len(response.items)} results")
        return response.video_ids

    async def get_videos(self, video_ids: List[str]) -> List[VideoResource]:
        """Snippet, duration and statistics for each id in one bulk lookup."""
        if not video_ids:
            return []

        self.ensure_configured()
        payload = await self._get_json("videos", {
            "part": "snippet,contentDetails,statistics",
            "id": ",".join(video_ids),
        })

        try:
            response = VideoListResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise UpstreamSchemaError("videos", str(e))

        return response.items

    async def autocomplete(self, query: str) -> List[str]:
        """Up to five search suggestions for ``query``.

        Suggestions are a convenience; any failure yields an empty list.
        """
        params = {"client": "youtube", "ds": "yt", "q": query}
        try:
            timeout = aiohttp.ClientTimeout(total=self.settings.youtube_timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.settings.autocomplete_url, params=params) as response:
                    if response.status != 200:
                        self.logger.warning(f"Autocomplete failed: HTTP {response.status}")
                        return []
                    content = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.warning(f"Autocomplete unavailable for '{query}': {str(e)}")
            return []

        # The first match is the echoed query itself
        matches = SUGGESTION_PATTERN.findall(content)
        return matches[1:6]

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Any:
        url = f"{self.settings.youtube_api_base_url}/{endpoint}"
        query = {**params, "key": self.settings.youtube_api_key}

        try:
            timeout = aiohttp.ClientTimeout(total=self.settings.youtube_timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=query) as response:
                    body = await response.text()
                    if response.status >= 400:
                        self.logger.warning(f"YouTube {endpoint} returned HTTP {response.status}")
                        raise UpstreamHTTPError(endpoint, response.status, self._decode_body(body))
        except aiohttp.ClientError as e:
            raise ServiceUnavailableError("YouTube Data API", str(e))
        except asyncio.TimeoutError:
            raise ServiceUnavailableError("YouTube Data API", f"timed out after {self.settings.youtube_timeout_seconds}s")

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise UpstreamSchemaError(endpoint, f"invalid JSON: {e}")

    @staticmethod
    def _decode_body(body: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError:
            return body
