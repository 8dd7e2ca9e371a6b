"""Response creation utilities."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from ..models.responses import (
    SuccessResponse, ErrorResponse, ResponseMetadata, ErrorInfo
)
from ..core.exceptions import IdeaEvaluatorBaseException, UpstreamHTTPError

class ResponseHelper:
    """Utilities for creating standardized API responses."""

    # Map error codes to HTTP status codes
    STATUS_MAPPING = {
        "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
        "NO_RESULTS": status.HTTP_404_NOT_FOUND,
        "CONFIGURATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "UPSTREAM_SCHEMA_ERROR": status.HTTP_502_BAD_GATEWAY,
        "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
        "TITLE_GENERATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    @staticmethod
    def generate_request_id() -> str:
        """Generate unique request ID."""
        return f"req_{uuid.uuid4().hex[:8]}"

    @staticmethod
    def create_response_metadata(request_id: str, processing_time_ms: Optional[int] = None) -> ResponseMetadata:
        """Create standardized response metadata."""
        return ResponseMetadata(
            request_id=request_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            processing_time_ms=processing_time_ms
        )

    @staticmethod
    def create_success_response(
        data: Any,
        request_id: Optional[str] = None,
        processing_time_ms: Optional[int] = None
    ) -> JSONResponse:
        """Create standardized success response."""
        if not request_id:
            request_id = ResponseHelper.generate_request_id()

        response = SuccessResponse(
            data=data,
            metadata=ResponseHelper.create_response_metadata(request_id, processing_time_ms)
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=response.model_dump(mode="json")
        )

    @staticmethod
    def create_error_response(
        error_code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        """Create standardized error response."""
        if not request_id:
            request_id = ResponseHelper.generate_request_id()

        response = ErrorResponse(
            error=ErrorInfo(
                code=error_code,
                message=message,
                details=details
            ),
            metadata=ResponseHelper.create_response_metadata(request_id)
        )
        return JSONResponse(
            status_code=status_code,
            content=response.model_dump(mode="json")
        )

    @staticmethod
    def status_for(exc: IdeaEvaluatorBaseException) -> int:
        """HTTP status for a service exception; upstream HTTP errors keep their status."""
        if isinstance(exc, UpstreamHTTPError):
            return exc.status_code
        return ResponseHelper.STATUS_MAPPING.get(exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def create_error_from_exception(
        exc: IdeaEvaluatorBaseException,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Create error response from custom exception."""
        return ResponseHelper.create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            status_code=ResponseHelper.status_for(exc),
            request_id=request_id,
            details=exc.details or None
        )
