"""Query parameter validation utilities."""
from typing import List, Optional
from app.core.config import settings
from app.core.exceptions import ValidationError

class IdeaValidator:
    """Validation for the free-text idea and region parameters."""

    @staticmethod
    def validate_idea(idea: Optional[str], field: str = "idea") -> str:
        """Return the trimmed idea, rejecting missing or blank input."""
        if idea is None or not idea.strip():
            raise ValidationError(f'Missing "{field}" parameter', {"field": field})
        return idea.strip()

    @staticmethod
    def validate_region(region: Optional[str]) -> str:
        """
        Return the upper-cased region code, defaulting when absent.

        Codes are not checked here; the search endpoint rejects unknown
        regions with its own status.
        """
        if region is None or not region.strip():
            return settings.default_region
        return region.strip().upper()

    @staticmethod
    def parse_topics(topics: Optional[str]) -> List[str]:
        """Split a comma separated topic list, dropping blanks."""
        if not topics:
            return []
        return [topic.strip() for topic in topics.split(",") if topic.strip()]
