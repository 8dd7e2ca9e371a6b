"""Video idea evaluation: retrieval, analysis pipeline and report assembly."""
from typing import List, Optional

from app.core.exceptions import NoSearchResultsError
from app.models.analysis import (
    ConfidenceAssessment, DurationBucket, OutlierAnalysis, PatternInsights,
    RecommendedBucket, SaturationAssessment, TitleSuggestion
)
from app.models.responses import EvaluationReport, EvaluationStatistics, RecommendedLength
from app.models.video import OutlierVideo, VideoRecord
from app.services.duration_analyzer import DurationGapAnalyzer, describe_recommendation
from app.services.normalizer import VideoRecordNormalizer
from app.services.outlier_detector import StatisticalOutlierDetector
from app.services.pattern_miner import PatternMiner
from app.services.scoring import ConfidenceScorer, SaturationScorer
from app.services.title_generator import TitleGenerator
from app.services.youtube_client import YouTubeClient
from app.utils.logging import CorrelatedLogger
from app.utils.numbers import percentage, round_int

REPORTED_OUTLIERS = 3


class ResultAssembler:
    """Combines the pipeline stage outputs into one ``EvaluationReport``."""

    def assemble(
        self,
        idea: str,
        region: str,
        outliers: OutlierAnalysis,
        recommended: RecommendedBucket,
        buckets: List[DurationBucket],
        patterns: PatternInsights,
        saturation: SaturationAssessment,
        confidence: ConfidenceAssessment,
        titles: List[TitleSuggestion]
    ) -> EvaluationReport:
        total = len(outliers.videos)

        return EvaluationReport(
            idea=idea,
            region=region,
            recommended_length=RecommendedLength(
                label=recommended.category,
                range=recommended.category.range_label if recommended.category else None,
                multiplier=recommended.multiplier,
                average_views=recommended.average_views,
                sample_size=recommended.sample_size,
                is_gap=recommended.is_gap,
                rationale=describe_recommendation(recommended, total),
            ),
            title_suggestions=titles,
            patterns=patterns,
            top_outliers=[
                OutlierVideo.from_record(video)
                for video in outliers.top_outliers[:REPORTED_OUTLIERS]
            ],
            saturation=saturation,
            statistics=EvaluationStatistics(
                outlier_count=len(outliers.outliers),
                outlier_rate=percentage(len(outliers.outliers), total),
                mean_velocity=round_int(outliers.mean_velocity),
                velocity_std_dev=round_int(outliers.velocity_std_dev),
                sample_size=total,
                confidence=confidence,
            ),
            length_breakdown=buckets,
            total_analyzed=total,
        )


class VideoIdeaEvaluator:
    """Runs one idea through retrieval and every analysis stage."""

    def __init__(
        self,
        youtube_client: YouTubeClient,
        title_generator: TitleGenerator,
        normalizer: Optional[VideoRecordNormalizer] = None
    ):
        self.youtube = youtube_client
        self.titles = title_generator
        self.normalizer = normalizer or VideoRecordNormalizer()
        self.detector = StatisticalOutlierDetector()
        self.duration_analyzer = DurationGapAnalyzer()
        self.pattern_miner = PatternMiner()
        self.saturation_scorer = SaturationScorer()
        self.confidence_scorer = ConfidenceScorer()
        self.assembler = ResultAssembler()
        self.logger = CorrelatedLogger(__name__)

    async def evaluate(self, idea: str, region: str, request_id: Optional[str] = None) -> EvaluationReport:
        """
        Evaluate a video idea against the videos currently ranking for it.

        Raises:
            ConfigurationError: If the data API key is missing
            NoSearchResultsError: If the search finds no videos
            UpstreamHTTPError: If the data API answers with an HTTP error
            UpstreamSchemaError: If a data API payload is malformed
        """
        if request_id:
            self.logger.request_id = request_id

        self.youtube.ensure_configured()

        video_ids = await self.youtube.search_video_ids(idea, region)
        if not video_ids:
            raise NoSearchResultsError(idea)

        resources = await self.youtube.get_videos(video_ids)
        videos = self.normalizer.normalize(resources)
        if not videos:
            raise NoSearchResultsError(idea)

        self.logger.info(f"Analyzing {len(videos)} videos for idea '{idea}'")
        return await self.analyze_corpus(idea, region, videos, request_id)

    async def analyze_corpus(
        self,
        idea: str,
        region: str,
        videos: List[VideoRecord],
        request_id: Optional[str] = None
    ) -> EvaluationReport:
        """Run the analysis stages over an already normalized corpus."""
        outliers = self.detector.detect(videos)
        recommended, buckets = self.duration_analyzer.analyze(outliers.videos)
        patterns = self.pattern_miner.mine(outliers)
        saturation = self.saturation_scorer.score(outliers.videos)
        confidence = self.confidence_scorer.score(len(videos), len(outliers.outliers), patterns)

        titles = await self.titles.suggest(idea, outliers, patterns, saturation, request_id)

        self.logger.info(
            f"Evaluation complete: {len(outliers.outliers)} outliers, "
            f"saturation {saturation.score}, confidence {confidence.score}"
        )

        return self.assembler.assemble(
            idea, region, outliers, recommended, buckets,
            patterns, saturation, confidence, titles
        )
