"""Schema validation for generated title responses."""

from .title_schemas import (
    TitleGenerationResponse,
    TitleResponseValidator,
    TitleResponseValidationError,
    extract_json_object,
    get_title_validator
)

__all__ = [
    'TitleGenerationResponse',
    'TitleResponseValidator',
    'TitleResponseValidationError',
    'extract_json_object',
    'get_title_validator'
]
