"""Logging configuration and utilities."""
import logging
import sys
from typing import Optional
from ..core.config import settings

class LoggerSetup:
    """Centralized logging configuration."""

    @staticmethod
    def setup_logging(
        level: Optional[str] = None,
        format_string: Optional[str] = None
    ) -> None:
        """Setup application logging."""
        log_level = level or settings.log_level
        log_format = format_string or settings.log_format

        # Configure root logger
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=log_format,
            handlers=[
                logging.StreamHandler(sys.stdout)
            ]
        )

        # Set specific logger levels
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)
        logging.getLogger("aiohttp").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)  # openai transport

class CorrelatedLogger:
    """Logger with correlation ID support for request tracking."""

    def __init__(self, name: str, request_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.request_id = request_id

    def bind(self, request_id: Optional[str]) -> "CorrelatedLogger":
        """Copy of this logger tagged with another request ID."""
        return CorrelatedLogger(self.logger.name, request_id)

    def _format_message(self, message: str) -> str:
        """Format message with request ID if available."""
        if self.request_id:
            return f"[{self.request_id}] {message}"
        return message

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with correlation ID."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with correlation ID."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with correlation ID."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with correlation ID."""
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception message with correlation ID."""
        self.logger.exception(self._format_message(message), **kwargs)

class MetricsLogger:
    """Logger for per-request analysis metrics."""

    def __init__(self):
        self.logger = logging.getLogger("metrics")

    def log_request_metrics(
        self,
        request_id: str,
        endpoint: str,
        processing_time_ms: int,
        status_code: int,
        sample_size: int = 0
    ) -> None:
        """Log request processing metrics."""
        self.logger.info(
            f"REQUEST_METRICS request_id={request_id} "
            f"endpoint={endpoint} "
            f"processing_time_ms={processing_time_ms} "
            f"status_code={status_code} sample_size={sample_size}"
        )

    def log_title_generation_metrics(
        self,
        request_id: Optional[str],
        success: bool,
        processing_time_ms: int,
        suggestion_count: int,
        error_code: Optional[str] = None
    ) -> None:
        """Log title generation metrics."""
        status = "success" if success else "fallback"

        log_msg = (
            f"TITLE_GENERATION_METRICS request_id={request_id} "
            f"status={status} processing_time_ms={processing_time_ms} "
            f"suggestions={suggestion_count}"
        )

        if error_code:
            log_msg += f" error_code={error_code}"

        self.logger.info(log_msg)
