"""Typed shapes of the YouTube Data API payloads the service reads.

Every upstream response is validated against these models before any field
is used, so a malformed payload fails with a named error instead of
surfacing later as a ``KeyError``.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SearchResultId(_UpstreamModel):
    video_id: str = Field(..., alias="videoId")


class SearchResult(_UpstreamModel):
    id: SearchResultId


class SearchListResponse(_UpstreamModel):
    items: List[SearchResult] = Field(default_factory=list)

    @property
    def video_ids(self) -> List[str]:
        return [item.id.video_id for item in self.items]


class Thumbnail(_UpstreamModel):
    url: str


class Thumbnails(_UpstreamModel):
    default: Optional[Thumbnail] = None
    medium: Optional[Thumbnail] = None
    high: Optional[Thumbnail] = None


class VideoSnippet(_UpstreamModel):
    title: str
    channel_id: str = Field(..., alias="channelId")
    channel_title: str = Field("", alias="channelTitle")
    published_at: datetime = Field(..., alias="publishedAt")
    thumbnails: Thumbnails = Field(default_factory=Thumbnails)


class VideoContentDetails(_UpstreamModel):
    duration: str = ""


class VideoStatistics(_UpstreamModel):
    view_count: Optional[int] = Field(None, alias="viewCount", ge=0)


class VideoResource(_UpstreamModel):
    id: str
    snippet: VideoSnippet
    content_details: VideoContentDetails = Field(default_factory=VideoContentDetails, alias="contentDetails")
    statistics: VideoStatistics = Field(default_factory=VideoStatistics)


class VideoListResponse(_UpstreamModel):
    items: List[VideoResource] = Field(default_factory=list)
