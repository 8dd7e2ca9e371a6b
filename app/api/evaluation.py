"""Idea evaluation endpoint."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_evaluator
from app.core.exceptions import IdeaEvaluatorBaseException
from app.services import VideoIdeaEvaluator
from app.utils.logging import CorrelatedLogger, MetricsLogger
from app.utils.response_helpers import ResponseHelper
from app.utils.validators import IdeaValidator

router = APIRouter(tags=["evaluation"])

logger = CorrelatedLogger(__name__)
metrics = MetricsLogger()


@router.get("/evaluate")
async def evaluate_idea(
    idea: Optional[str] = Query(None, description="The video idea to evaluate"),
    region: Optional[str] = Query(None, description="Two-letter region code, defaults to US"),
    evaluator: VideoIdeaEvaluator = Depends(get_evaluator)
):
    """Evaluate a video idea against the videos currently ranking for it.

    Returns the recommended length niche, title suggestions, title patterns,
    top outliers, saturation and confidence for the search corpus.
    """
    request_id = ResponseHelper.generate_request_id()
    start_time = datetime.now()

    try:
        cleaned_idea = IdeaValidator.validate_idea(idea)
        region_code = IdeaValidator.validate_region(region)

        report = await evaluator.evaluate(cleaned_idea, region_code, request_id)

        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        metrics.log_request_metrics(request_id, "/evaluate", processing_time, 200, report.total_analyzed)

        return ResponseHelper.create_success_response(
            data=report.model_dump(mode="json"),
            request_id=request_id,
            processing_time_ms=processing_time
        )

    except IdeaEvaluatorBaseException as e:
        response = ResponseHelper.create_error_from_exception(e, request_id)
        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        metrics.log_request_metrics(request_id, "/evaluate", processing_time, response.status_code)
        return response
    except Exception as e:
        logger.exception(f"[{request_id}] Unexpected evaluation failure: {str(e)}")
        return ResponseHelper.create_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message="Internal server error",
            status_code=500,
            request_id=request_id
        )
