"""
Pydantic schemas for title generation response validation.
"""
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.models.analysis import TitleSuggestion
from app.utils.logging import CorrelatedLogger


class TitleGenerationResponse(BaseModel):
    """Validated body of the title model's JSON answer."""
    titles: List[TitleSuggestion] = Field(..., description="Suggested titles with reasoning")

    @field_validator('titles', mode='before')
    @classmethod
    def drop_unusable_entries(cls, v):
        """Keep only entries that carry a non-blank title."""
        if not isinstance(v, list):
            raise ValueError("titles must be an array")

        usable = []
        for entry in v:
            if isinstance(entry, dict) and isinstance(entry.get('title'), str) and entry['title'].strip():
                usable.append({
                    'title': entry['title'].strip(),
                    'reasoning': str(entry.get('reasoning') or '').strip()
                })
        return usable


class TitleResponseValidationError(Exception):
    """Exception raised when the title answer does not match its schema."""

    def __init__(self, message: str, validation_errors: List[Dict[str, Any]] = None):
        self.message = message
        self.validation_errors = validation_errors or []
        super().__init__(self.message)


def extract_json_object(content: str) -> Optional[Dict[str, Any]]:
    """Best-effort extraction of one JSON object from free-form model output.

    Takes the text between the first ``{`` and the last ``}`` and decodes it.
    Returns None when there is no such span, it does not decode, or it is not
    an object.
    """
    if not content:
        return None

    start_idx = content.find('{')
    end_idx = content.rfind('}')
    if start_idx == -1 or end_idx <= start_idx:
        return None

    try:
        data = json.loads(content[start_idx:end_idx + 1])
    except json.JSONDecodeError:
        return None

    return data if isinstance(data, dict) else None


class TitleResponseValidator:
    """Turns raw model text into a typed ``TitleGenerationResponse``."""

    def __init__(self):
        self.logger = CorrelatedLogger(__name__)

    def validate_content(self, content: str) -> TitleGenerationResponse:
        """
        Extract and validate the model answer.

        Raises:
            TitleResponseValidationError: If no JSON object is found or it fails the schema
        """
        raw_data = extract_json_object(content)
        if raw_data is None:
            preview = (content or '')[:200]
            raise TitleResponseValidationError(f"No JSON object found in response: {preview}")

        try:
            response = TitleGenerationResponse(**raw_data)
        except ValidationError as e:
            raise TitleResponseValidationError(f"Validation failed: {str(e)}", e.errors())

        self.logger.debug(f"Title response validated with {len(response.titles)} titles")
        return response


# Global validator instance
_title_validator = None

def get_title_validator() -> TitleResponseValidator:
    """Get global title response validator instance (singleton pattern)."""
    global _title_validator
    if _title_validator is None:
        _title_validator = TitleResponseValidator()
    return _title_validator
