"""Analysis result models produced by the scoring pipeline."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .video import DurationCategory, VideoRecord


class AssessmentLevel(str, Enum):
    """Three-tier label shared by saturation and confidence."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class DurationBucket(BaseModel):
    """Aggregate over one duration category."""
    category: DurationCategory
    count: int = 0
    total_views: int = 0
    average_views: int = 0


class RecommendedBucket(BaseModel):
    """The single recommended length niche."""
    category: Optional[DurationCategory] = Field(None, description="None when no category qualifies")
    multiplier: float = Field(0.0, description="Category average views over corpus average views")
    average_views: int = 0
    sample_size: int = 0
    is_gap: bool = Field(False, description="Under-served category with at-or-above-average demand")

    @property
    def is_empty(self) -> bool:
        return self.category is None


class OutlierAnalysis(BaseModel):
    """Corpus-wide velocity statistics and per-video z-scores."""
    videos: List[VideoRecord] = Field(..., description="Corpus in retrieval order with z-scores set")
    ranked: List[VideoRecord] = Field(..., description="Corpus sorted by z-score, descending, stable")
    top_outliers: List[VideoRecord]
    outliers: List[VideoRecord]
    mean_velocity: float
    velocity_std_dev: float


class PatternInsights(BaseModel):
    """Title packaging signals mined from the best performers."""
    uses_numbers: int = Field(..., ge=0, le=100)
    uses_questions: int = Field(..., ge=0, le=100)
    uses_emoji: int = Field(..., ge=0, le=100)
    uses_all_caps: int = Field(..., ge=0, le=100)
    average_title_length: int
    top_words: List[str] = Field(default_factory=list)
    saturated_patterns: List[str] = Field(default_factory=list)
    based_on: int = Field(..., description="Size of the analysis set")
    source: str = Field(..., description="'outliers' or 'top performers'")


class SaturationFactors(BaseModel):
    competition: int
    channel_concentration: int
    content_age: int


class SaturationAssessment(BaseModel):
    """How crowded and mature the competitive landscape is."""
    score: int = Field(..., ge=0, le=100)
    label: AssessmentLevel
    factors: SaturationFactors


class ConfidenceAssessment(BaseModel):
    """How much weight the recommendations deserve."""
    score: int = Field(..., ge=20, le=95)
    level: AssessmentLevel
    factors: List[str] = Field(default_factory=list)


class TitleSuggestion(BaseModel):
    title: str = Field(..., min_length=1)
    reasoning: str = ""
