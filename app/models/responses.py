"""Response models for the Video Idea Evaluator."""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from .analysis import (
    ConfidenceAssessment, DurationBucket, PatternInsights,
    SaturationAssessment, TitleSuggestion
)
from .video import DurationCategory, OutlierVideo

class ResponseMetadata(BaseModel):
    """Standard response metadata."""
    request_id: str
    api_version: str = "1.0.0"
    timestamp: Optional[str] = None
    processing_time_ms: Optional[int] = None

class ErrorInfo(BaseModel):
    """Error information structure."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

class SuccessResponse(BaseModel):
    """Standard success response."""
    success: bool = True
    data: Any
    metadata: ResponseMetadata

class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: ErrorInfo
    metadata: ResponseMetadata

class RecommendedLength(BaseModel):
    """Recommended length niche as shown to the creator."""
    label: Optional[DurationCategory] = None
    range: Optional[str] = None
    multiplier: float
    average_views: int
    sample_size: int
    is_gap: bool
    rationale: str

class EvaluationStatistics(BaseModel):
    """Velocity statistics and confidence for the analyzed corpus."""
    outlier_count: int
    outlier_rate: int
    mean_velocity: int
    velocity_std_dev: int
    sample_size: int
    confidence: ConfidenceAssessment

class EvaluationReport(BaseModel):
    """Complete evaluation of one video idea."""
    idea: str
    region: str
    recommended_length: RecommendedLength
    title_suggestions: List[TitleSuggestion]
    patterns: PatternInsights
    top_outliers: List[OutlierVideo]
    saturation: SaturationAssessment
    statistics: EvaluationStatistics
    length_breakdown: List[DurationBucket]
    total_analyzed: int

class TopicDemand(BaseModel):
    average_views: int
    total_views: int
    search_interest: int
    average_velocity: int

class TopicSupply(BaseModel):
    video_count: int
    quality_video_count: int
    channel_concentration: int
    average_age_days: int

class SampleVideo(BaseModel):
    id: str
    title: str
    views: int
    velocity: int
    thumbnail: str

class TopicOpportunity(BaseModel):
    """Demand versus supply for one candidate sub-topic."""
    topic: str
    demand: TopicDemand
    supply: TopicSupply
    opportunity_score: int
    opportunity_grade: str
    signal: str
    sample_videos: List[SampleVideo]

class MarketOverview(BaseModel):
    total_analyzed: int
    average_opportunity: int
    best_opportunity: int
    strong_opportunities: int

class OpportunityReport(BaseModel):
    """Ranked opportunities across the sub-topics of a seed."""
    seed: str
    region: str
    overview: MarketOverview
    opportunities: List[TopicOpportunity]
    top_picks: List[TopicOpportunity]
    insight: str

class DependencyStatus(BaseModel):
    """External collaborator configuration status."""
    youtube: str
    openai: str

class HealthData(BaseModel):
    """Complete health check response."""
    status: str
    timestamp: str
    version: str
    uptime_seconds: int
    dependencies: DependencyStatus
