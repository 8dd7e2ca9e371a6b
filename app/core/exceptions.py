"""Custom exceptions for the Video Idea Evaluator."""
from typing import Any, Optional

class IdeaEvaluatorBaseException(Exception):
    """Base exception for the idea evaluator service."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class ValidationError(IdeaEvaluatorBaseException):
    """Exception raised for input validation errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, "VALIDATION_ERROR", details)

class ConfigurationError(IdeaEvaluatorBaseException):
    """Exception raised for configuration errors."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for {setting}: {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, "CONFIGURATION_ERROR", details)

class NoSearchResultsError(IdeaEvaluatorBaseException):
    """Exception raised when the corpus search finds nothing."""

    def __init__(self, query: str):
        message = "No videos found for this idea"
        details = {"query": query}
        super().__init__(message, "NO_RESULTS", details)

class UpstreamHTTPError(IdeaEvaluatorBaseException):
    """Exception raised when the video platform API answers with an HTTP error."""

    def __init__(self, endpoint: str, status_code: int, body: Any = None):
        self.status_code = status_code
        message = f"API Error: {status_code} from {endpoint}"
        details = {"endpoint": endpoint, "status": status_code, "body": body}
        super().__init__(message, "UPSTREAM_HTTP_ERROR", details)

class UpstreamSchemaError(IdeaEvaluatorBaseException):
    """Exception raised when an upstream payload does not match its expected shape."""

    def __init__(self, endpoint: str, reason: str):
        message = f"Unexpected response shape from {endpoint}"
        details = {"endpoint": endpoint, "reason": reason}
        super().__init__(message, "UPSTREAM_SCHEMA_ERROR", details)

class ServiceUnavailableError(IdeaEvaluatorBaseException):
    """Exception raised when an external service cannot be reached."""

    def __init__(self, service: str, reason: str = "Service temporarily unavailable"):
        message = f"Service unavailable: {service} - {reason}"
        details = {"service": service, "reason": reason}
        super().__init__(message, "SERVICE_UNAVAILABLE", details)

class TitleGenerationError(IdeaEvaluatorBaseException):
    """Exception raised when the title collaborator gives no usable answer."""

    def __init__(self, reason: str):
        message = f"Title generation failed: {reason}"
        details = {"reason": reason}
        super().__init__(message, "TITLE_GENERATION_FAILED", details)
