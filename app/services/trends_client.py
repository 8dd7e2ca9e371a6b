"""Google Trends search interest via pytrends."""
import asyncio
from typing import Optional

from pytrends.request import TrendReq

from app.core.config import Settings
from app.utils.logging import CorrelatedLogger
from app.utils.numbers import round_int

RECENT_POINTS = 4


class TrendsClient:
    """Recent search interest (0-100) for a keyword in one region.

    Lookups are best effort and return None on any failure.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = CorrelatedLogger(__name__)

    async def search_interest(self, keyword: str, region: str) -> Optional[int]:
        """Mean of the last four interest points, or None when unavailable."""
        if not self.settings.trends_enabled:
            return None

        try:
            return await asyncio.to_thread(self._fetch_interest, keyword, region)
        except Exception as e:
            self.logger.warning(f"Trends unavailable for '{keyword}': {str(e)}")
            return None

    def _fetch_interest(self, keyword: str, region: str) -> Optional[int]:
        pytrends = TrendReq(hl="en-US", tz=0, timeout=(10, self.settings.trends_timeout_seconds))
        pytrends.build_payload([keyword], timeframe=self.settings.trends_timeframe, geo=region)
        frame = pytrends.interest_over_time()

        if frame.empty or keyword not in frame.columns:
            return None

        # Divides by four even when fewer points exist
        recent = [int(value) for value in frame[keyword].tail(RECENT_POINTS)]
        return round_int(sum(recent) / RECENT_POINTS)
