"""Opportunity scan endpoint."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_opportunity_scanner
from app.core.exceptions import IdeaEvaluatorBaseException
from app.services import OpportunityScanner
from app.utils.logging import CorrelatedLogger, MetricsLogger
from app.utils.response_helpers import ResponseHelper
from app.utils.validators import IdeaValidator

router = APIRouter(tags=["opportunities"])

logger = CorrelatedLogger(__name__)
metrics = MetricsLogger()


@router.get("/opportunities")
async def scan_opportunities(
    seed: Optional[str] = Query(None, description="Seed topic to expand"),
    region: Optional[str] = Query(None, description="Two-letter region code, defaults to US"),
    topics: Optional[str] = Query(None, description="Comma separated sub-topics to compare instead of suggestions"),
    scanner: OpportunityScanner = Depends(get_opportunity_scanner)
):
    """Rank the sub-topics of a seed by demand relative to quality supply."""
    request_id = ResponseHelper.generate_request_id()
    start_time = datetime.now()

    try:
        cleaned_seed = IdeaValidator.validate_idea(seed, field="seed")
        region_code = IdeaValidator.validate_region(region)
        topic_list = IdeaValidator.parse_topics(topics)

        report = await scanner.scan(cleaned_seed, region_code, topic_list or None, request_id)

        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        metrics.log_request_metrics(
            request_id, "/opportunities", processing_time, 200, report.overview.total_analyzed
        )

        return ResponseHelper.create_success_response(
            data=report.model_dump(mode="json"),
            request_id=request_id,
            processing_time_ms=processing_time
        )

    except IdeaEvaluatorBaseException as e:
        response = ResponseHelper.create_error_from_exception(e, request_id)
        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        metrics.log_request_metrics(request_id, "/opportunities", processing_time, response.status_code)
        return response
    except Exception as e:
        logger.exception(f"[{request_id}] Unexpected opportunity scan failure: {str(e)}")
        return ResponseHelper.create_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message="Internal server error",
            status_code=500,
            request_id=request_id
        )
