"""Title suggestions from the OpenAI chat completions API."""
import asyncio
from datetime import datetime
from typing import List, Optional

import numpy as np
from openai import OpenAI

from app.core.config import Settings
from app.core.exceptions import TitleGenerationError
from app.models.analysis import (
    OutlierAnalysis, PatternInsights, SaturationAssessment, TitleSuggestion
)
from app.utils.logging import CorrelatedLogger, MetricsLogger
from app.utils.numbers import round_half_up
from app.config.templates import get_template_engine
from app.config.schemas import TitleResponseValidationError, get_title_validator

PROMPT_TYPE = "title_generation"
FALLBACK_TITLE_COUNT = 3


def fallback_titles(idea: str) -> List[TitleSuggestion]:
    """The three generic titles used whenever generation is unavailable."""
    return [
        TitleSuggestion(title=f"{idea} - Complete Guide", reasoning="Classic format"),
        TitleSuggestion(title=f"5 {idea} Tips You Need", reasoning="Listicle with number"),
        TitleSuggestion(title=f"{idea} for Beginners", reasoning="Beginner-friendly"),
    ]


class TitleGenerator:
    """Builds the title brief and asks the model for suggestions.

    ``suggest`` never raises: every failure path, including a missing API
    key, ends in ``fallback_titles``.
    """

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.settings = settings
        self.logger = CorrelatedLogger(__name__)
        self.metrics = MetricsLogger()
        self.template_engine = get_template_engine()
        self.validator = get_title_validator()
        self.client = client if client is not None else self._initialize_client()

    def _initialize_client(self) -> Optional[OpenAI]:
        """Initialize OpenAI client if API key is configured."""
        if not self.settings.openai_api_key:
            return None

        try:
            return OpenAI(api_key=self.settings.openai_api_key)
        except Exception as e:
            self.logger.error(f"OpenAI client unavailable, titles will use fallback: {str(e)}")
            return None

    def build_brief(
        self,
        idea: str,
        outliers: OutlierAnalysis,
        patterns: PatternInsights,
        saturation: SaturationAssessment
    ) -> str:
        """Render the prompt describing the competitive landscape."""
        use_outliers = len(outliers.top_outliers) >= 3
        examples = outliers.top_outliers if use_outliers else outliers.ranked[:5]
        average_views = float(np.mean([video.views for video in outliers.videos])) if outliers.videos else 0.0

        return self.template_engine.render_prompt(
            PROMPT_TYPE,
            idea=idea,
            outlier_heading="OUTLIER TITLES" if use_outliers else "TOP PERFORMERS",
            outliers=[
                {
                    "title": video.title,
                    "views": video.views,
                    "multiple": round_half_up(video.views / average_views, 1) if average_views > 0 else 0.0,
                }
                for video in examples
            ],
            saturation_score=saturation.score,
            saturation_label=saturation.label.value,
            directive=self.template_engine.get_directive(PROMPT_TYPE, saturation.label.value),
            saturated_patterns=patterns.saturated_patterns,
            uses_numbers=patterns.uses_numbers,
            uses_questions=patterns.uses_questions,
            uses_emoji=patterns.uses_emoji,
            uses_all_caps=patterns.uses_all_caps,
            average_title_length=patterns.average_title_length,
            top_words=patterns.top_words,
            title_count=self.settings.title_suggestion_limit,
        )

    async def suggest(
        self,
        idea: str,
        outliers: OutlierAnalysis,
        patterns: PatternInsights,
        saturation: SaturationAssessment,
        request_id: Optional[str] = None
    ) -> List[TitleSuggestion]:
        """Generated titles, or the fallback set when generation fails."""
        # The generator is shared across requests, so tag a copy
        logger = self.logger.bind(request_id)
        start_time = datetime.now()

        try:
            suggestions = await self._generate(idea, outliers, patterns, saturation)
        except TitleGenerationError as e:
            logger.warning(f"Title generation unavailable, using fallback: {e.message}")
            self._log_metrics(request_id, start_time, False, FALLBACK_TITLE_COUNT, e.error_code)
            return fallback_titles(idea)
        except Exception as e:
            logger.error(f"Title generation error, using fallback: {str(e)}")
            self._log_metrics(request_id, start_time, False, FALLBACK_TITLE_COUNT, "TITLE_GENERATION_FAILED")
            return fallback_titles(idea)

        self._log_metrics(request_id, start_time, True, len(suggestions))
        return suggestions

    async def _generate(
        self,
        idea: str,
        outliers: OutlierAnalysis,
        patterns: PatternInsights,
        saturation: SaturationAssessment
    ) -> List[TitleSuggestion]:
        if not self.client:
            raise TitleGenerationError("OPENAI_API_KEY not configured")

        prompt_text = self.build_brief(idea, outliers, patterns, saturation)

        response = await asyncio.to_thread(
            self.client.chat.completions.create,
            model=self.settings.openai_model,
            messages=[{"role": "user", "content": prompt_text}],
            temperature=0.8
        )

        content = response.choices[0].message.content
        if not content:
            raise TitleGenerationError("empty response content")

        try:
            validated = self.validator.validate_content(content)
        except TitleResponseValidationError as e:
            raise TitleGenerationError(e.message)

        if not validated.titles:
            raise TitleGenerationError("response contained no usable titles")

        return validated.titles[:self.settings.title_suggestion_limit]

    def _log_metrics(
        self,
        request_id: Optional[str],
        start_time: datetime,
        success: bool,
        count: int,
        error_code: Optional[str] = None
    ) -> None:
        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        self.metrics.log_title_generation_metrics(
            request_id, success, processing_time, count, error_code
        )
