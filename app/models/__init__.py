"""Data models for the Video Idea Evaluator."""
from .video import DurationCategory, VideoRecord, OutlierVideo
from .analysis import (
    AssessmentLevel, DurationBucket, RecommendedBucket, OutlierAnalysis,
    PatternInsights, SaturationFactors, SaturationAssessment,
    ConfidenceAssessment, TitleSuggestion
)
from .youtube import SearchListResponse, VideoListResponse, VideoResource
from .responses import (
    ResponseMetadata, ErrorInfo, SuccessResponse, ErrorResponse,
    RecommendedLength, EvaluationStatistics, EvaluationReport,
    TopicDemand, TopicSupply, SampleVideo, TopicOpportunity,
    MarketOverview, OpportunityReport, DependencyStatus, HealthData
)

__all__ = [
    "DurationCategory", "VideoRecord", "OutlierVideo",
    "AssessmentLevel", "DurationBucket", "RecommendedBucket", "OutlierAnalysis",
    "PatternInsights", "SaturationFactors", "SaturationAssessment",
    "ConfidenceAssessment", "TitleSuggestion",
    "SearchListResponse", "VideoListResponse", "VideoResource",
    "ResponseMetadata", "ErrorInfo", "SuccessResponse", "ErrorResponse",
    "RecommendedLength", "EvaluationStatistics", "EvaluationReport",
    "TopicDemand", "TopicSupply", "SampleVideo", "TopicOpportunity",
    "MarketOverview", "OpportunityReport", "DependencyStatus", "HealthData"
]
