"""Demand versus supply scan across the sub-topics of a seed idea."""
from typing import List, Optional, Tuple

import numpy as np

from app.core.config import Settings
from app.core.exceptions import (
    NoSearchResultsError, ServiceUnavailableError, UpstreamHTTPError, UpstreamSchemaError
)
from app.models.responses import (
    MarketOverview, OpportunityReport, SampleVideo, TopicDemand,
    TopicOpportunity, TopicSupply
)
from app.models.video import VideoRecord
from app.services.normalizer import VideoRecordNormalizer
from app.services.outlier_detector import StatisticalOutlierDetector
from app.services.scoring import channel_concentration, mean_age_days
from app.services.trends_client import TrendsClient
from app.services.youtube_client import YouTubeClient
from app.utils.logging import CorrelatedLogger
from app.utils.numbers import round_int

MIN_TOPIC_RESULTS = 5
DEFAULT_SEARCH_INTEREST = 50
SAMPLE_VIDEO_COUNT = 3
TOP_PICK_SCORE = 50
TOP_PICK_COUNT = 3
STALE_AGE_DAYS = 180

GRADE_SIGNALS = [
    (80, "A", "Strong Arbitrage: High demand, weak quality supply. Move fast."),
    (65, "B", "Good Opportunity: Demand exceeds supply. Differentiation recommended."),
    (50, "C", "Moderate Gap: Some room to compete with right angle."),
    (35, "D", "Crowded Market: Supply meets demand. Need unique value prop."),
]
FAILING_GRADE = ("F", "Oversupplied: Quality content already serves this market well.")


def demand_score(average_views: int, search_interest: int, average_velocity: int) -> float:
    return (average_views / 10000) * 0.4 + (search_interest / 100) * 0.3 + (average_velocity / 1000) * 0.3


def supply_score(video_count: int, quality_count: int, concentration: int, results_per_topic: int = 25) -> float:
    return (
        (video_count / results_per_topic) * 0.3
        + (quality_count / 10) * 0.5
        + ((100 - concentration) / 100) * 0.2
    )


def freshness_bonus(average_age_days: int) -> float:
    """Up to 0.2 extra for topics whose content has gone stale."""
    return min(average_age_days / STALE_AGE_DAYS, 1.0) * 0.2


def opportunity_score(demand: float, supply: float, freshness: float) -> int:
    raw = demand / max(supply, 0.1) + freshness
    return round_int(min(100.0, raw * 25))


def grade_for(score: int) -> Tuple[str, str]:
    """Letter grade and signal sentence for an opportunity score."""
    for threshold, grade, signal in GRADE_SIGNALS:
        if score >= threshold:
            return grade, signal
    return FAILING_GRADE


class OpportunityScanner:
    """Ranks candidate sub-topics by how far demand outruns quality supply."""

    def __init__(
        self,
        youtube_client: YouTubeClient,
        settings: Settings,
        trends_client: TrendsClient,
        normalizer: Optional[VideoRecordNormalizer] = None
    ):
        self.youtube = youtube_client
        self.settings = settings
        self.trends = trends_client
        self.normalizer = normalizer or VideoRecordNormalizer()
        self.detector = StatisticalOutlierDetector()
        self.logger = CorrelatedLogger(__name__)

    async def scan(
        self,
        seed: str,
        region: str,
        topics: Optional[List[str]] = None,
        request_id: Optional[str] = None
    ) -> OpportunityReport:
        """
        Analyze the seed's candidate topics and rank them.

        Raises:
            ConfigurationError: If the data API key is missing
            NoSearchResultsError: If no candidate topic had enough results
        """
        if request_id:
            self.logger.request_id = request_id

        self.youtube.ensure_configured()

        candidates = await self.candidate_topics(seed, topics)
        self.logger.info(f"Scanning {len(candidates)} topics for seed '{seed}'")

        analyses: List[TopicOpportunity] = []
        for topic in candidates:
            analysis = await self.analyze_topic(topic, region)
            if analysis is not None:
                analyses.append(analysis)

        if not analyses:
            raise NoSearchResultsError(seed)

        return self.build_report(seed, region, analyses)

    async def candidate_topics(self, seed: str, topics: Optional[List[str]] = None) -> List[str]:
        """Explicit topics when given, else the seed plus autocomplete suggestions."""
        if topics:
            raw = [topic.strip() for topic in topics]
        else:
            raw = [seed] + await self.youtube.autocomplete(seed)

        unique: List[str] = []
        for topic in raw:
            if topic and topic not in unique:
                unique.append(topic)
        return unique[:self.settings.opportunity_max_topics]

    async def analyze_topic(self, topic: str, region: str) -> Optional[TopicOpportunity]:
        """Score one topic; None when it has too few results or retrieval fails."""
        try:
            video_ids = await self.youtube.search_video_ids(
                topic, region, self.settings.opportunity_results_per_topic
            )
            if len(video_ids) < MIN_TOPIC_RESULTS:
                self.logger.info(f"Skipping '{topic}': only {len(video_ids)} results")
                return None
            resources = await self.youtube.get_videos(video_ids)
        except (UpstreamHTTPError, UpstreamSchemaError, ServiceUnavailableError) as e:
            self.logger.warning(f"Failed to analyze topic '{topic}': {e.message}")
            return None

        videos = self.normalizer.normalize(resources)
        if len(videos) < MIN_TOPIC_RESULTS:
            return None

        interest = await self.trends.search_interest(topic, region)
        if interest is None:
            interest = DEFAULT_SEARCH_INTEREST

        return self.score_topic(topic, videos, interest)

    def score_topic(
        self,
        topic: str,
        videos: List[VideoRecord],
        search_interest: int = DEFAULT_SEARCH_INTEREST
    ) -> TopicOpportunity:
        outliers = self.detector.detect(videos)

        total_views = sum(video.views for video in videos)
        demand = TopicDemand(
            average_views=round_int(total_views / len(videos)),
            total_views=total_views,
            search_interest=search_interest,
            average_velocity=round_int(float(np.mean([video.velocity for video in videos]))),
        )
        supply = TopicSupply(
            video_count=len(videos),
            quality_video_count=len(outliers.outliers),
            channel_concentration=round_int(channel_concentration(videos) * 100),
            average_age_days=round_int(mean_age_days(videos)),
        )

        score = opportunity_score(
            demand_score(demand.average_views, demand.search_interest, demand.average_velocity),
            supply_score(
                supply.video_count, supply.quality_video_count, supply.channel_concentration,
                self.settings.opportunity_results_per_topic
            ),
            freshness_bonus(supply.average_age_days),
        )
        grade, signal = grade_for(score)

        return TopicOpportunity(
            topic=topic,
            demand=demand,
            supply=supply,
            opportunity_score=score,
            opportunity_grade=grade,
            signal=signal + self._signal_notes(demand, supply),
            sample_videos=[
                SampleVideo(
                    id=video.id,
                    title=video.title,
                    views=video.views,
                    velocity=video.velocity,
                    thumbnail=video.thumbnail,
                )
                for video in videos[:SAMPLE_VIDEO_COUNT]
            ],
        )

    @staticmethod
    def _signal_notes(demand: TopicDemand, supply: TopicSupply) -> str:
        notes = ""
        if supply.quality_video_count <= 2 and demand.average_views > 50000:
            notes += " Few quality videos despite high views."
        if supply.average_age_days > STALE_AGE_DAYS and demand.search_interest > 50:
            notes += " Content is stale but interest remains."
        if supply.channel_concentration > 60:
            notes += " Market dominated by few players."
        return notes

    def build_report(self, seed: str, region: str, analyses: List[TopicOpportunity]) -> OpportunityReport:
        ranked = sorted(analyses, key=lambda item: item.opportunity_score, reverse=True)
        picks = [item for item in ranked if item.opportunity_score >= TOP_PICK_SCORE]

        overview = MarketOverview(
            total_analyzed=len(ranked),
            average_opportunity=round_int(sum(item.opportunity_score for item in ranked) / len(ranked)),
            best_opportunity=ranked[0].opportunity_score,
            strong_opportunities=sum(1 for item in ranked if item.opportunity_grade in ("A", "B")),
        )

        return OpportunityReport(
            seed=seed,
            region=region,
            overview=overview,
            opportunities=ranked,
            top_picks=picks[:TOP_PICK_COUNT],
            insight=self._insight(len(picks)),
        )

    @staticmethod
    def _insight(pick_count: int) -> str:
        if pick_count >= 2:
            return f"Found {pick_count} undervalued content opportunities in this market."
        if pick_count == 1:
            return "One viable opportunity identified. Consider the top pick."
        return "Market appears fairly valued. Consider adjacent niches."
