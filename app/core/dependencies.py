"""Dependency injection setup for FastAPI."""
from functools import lru_cache
from fastapi import Depends

from .config import settings
from app.services import (
    OpportunityScanner, TitleGenerator, TrendsClient, VideoIdeaEvaluator, YouTubeClient
)

# Service instances cache
@lru_cache()
def get_youtube_client() -> YouTubeClient:
    """Get YouTubeClient service instance."""
    return YouTubeClient(settings)

@lru_cache()
def get_trends_client() -> TrendsClient:
    """Get TrendsClient service instance."""
    return TrendsClient(settings)

@lru_cache()
def get_title_generator() -> TitleGenerator:
    """Get TitleGenerator service instance."""
    return TitleGenerator(settings)

# Service dependencies
def get_evaluator(
    youtube_client: YouTubeClient = Depends(get_youtube_client),
    title_generator: TitleGenerator = Depends(get_title_generator)
) -> VideoIdeaEvaluator:
    """Dependency for the VideoIdeaEvaluator service."""
    return VideoIdeaEvaluator(youtube_client, title_generator)

def get_opportunity_scanner(
    youtube_client: YouTubeClient = Depends(get_youtube_client),
    trends_client: TrendsClient = Depends(get_trends_client)
) -> OpportunityScanner:
    """Dependency for the OpportunityScanner service."""
    return OpportunityScanner(youtube_client, settings, trends_client)
