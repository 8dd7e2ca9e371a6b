"""
Configuration management for the Video Idea Evaluator.
Centralizes environment variable handling and application settings.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # API Configuration
        self.api_title = "Video Idea Evaluator"
        self.api_description = "Evaluates a video idea against the videos already competing for it"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
        self.allowed_origins = ["*"]

        # YouTube Data API
        self.youtube_api_key = os.getenv("YOUTUBE_API_KEY", "")
        self.youtube_api_base_url = os.getenv(
            "YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3"
        )
        self.youtube_timeout_seconds = int(os.getenv("YOUTUBE_TIMEOUT_SECONDS", "30"))
        self.autocomplete_url = os.getenv(
            "AUTOCOMPLETE_URL", "https://suggestqueries.google.com/complete/search"
        )

        # Retrieval limits (the search endpoint never returns more than 50 per page)
        self.search_max_results = min(int(os.getenv("SEARCH_MAX_RESULTS", "50")), 50)
        self.default_region = os.getenv("DEFAULT_REGION", "US")

        # Title generation
        self.openai_api_key = os.getenv("OPENAI_API_KEY", "")
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.title_suggestion_limit = int(os.getenv("TITLE_SUGGESTION_LIMIT", "5"))

        # Opportunity scanner
        self.opportunity_max_topics = int(os.getenv("OPPORTUNITY_MAX_TOPICS", "8"))
        self.opportunity_results_per_topic = int(os.getenv("OPPORTUNITY_RESULTS_PER_TOPIC", "25"))

        # Google Trends (opportunity scanner demand signal)
        self.trends_enabled = os.getenv("TRENDS_ENABLED", "true").lower() == "true"
        self.trends_timeframe = os.getenv("TRENDS_TIMEFRAME", "all")
        self.trends_timeout_seconds = int(os.getenv("TRENDS_TIMEOUT_SECONDS", "25"))

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Create global settings instance
settings = Settings()
