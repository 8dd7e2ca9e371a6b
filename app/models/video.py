"""Video-related data models."""
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

class DurationCategory(str, Enum):
    """The five fixed length niches, in canonical order."""
    SHORTS = "Shorts"
    SHORT = "Short"
    MEDIUM = "Medium"
    LONG = "Long"
    VERY_LONG = "Very Long"

    @property
    def range_label(self) -> str:
        """Human readable label including the duration range."""
        return DURATION_RANGE_LABELS[self]

    @classmethod
    def canonical_order(cls) -> List["DurationCategory"]:
        """Categories from shortest to longest."""
        return [cls.SHORTS, cls.SHORT, cls.MEDIUM, cls.LONG, cls.VERY_LONG]

DURATION_RANGE_LABELS = {
    DurationCategory.SHORTS: "Shorts (<1 min)",
    DurationCategory.SHORT: "Short (1-5 min)",
    DurationCategory.MEDIUM: "Medium (5-10 min)",
    DurationCategory.LONG: "Long (10-20 min)",
    DurationCategory.VERY_LONG: "Very Long (>20 min)",
}

class VideoRecord(BaseModel):
    """One analyzed video from the search corpus."""
    id: str
    title: str
    channel_id: str
    channel_title: str
    published_at: datetime
    views: int = Field(..., ge=0)
    thumbnail: str = ""
    duration_seconds: int = Field(..., ge=0)
    duration_category: DurationCategory
    days_since_publish: int = Field(..., ge=1)
    velocity: int = Field(..., ge=0, description="Views per day since publication")

    # Set by the outlier detector, relative to the corpus it ran against
    z_score: float = 0.0
    is_outlier: bool = False

class OutlierVideo(BaseModel):
    """Outlier summary exposed in the evaluation report."""
    id: str
    title: str
    views: int
    thumbnail: str
    duration_category: DurationCategory
    velocity: int
    z_score: float
    is_outlier: bool

    @classmethod
    def from_record(cls, record: VideoRecord) -> "OutlierVideo":
        return cls(
            id=record.id,
            title=record.title,
            views=record.views,
            thumbnail=record.thumbnail,
            duration_category=record.duration_category,
            velocity=record.velocity,
            z_score=record.z_score,
            is_outlier=record.is_outlier,
        )
