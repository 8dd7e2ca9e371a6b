"""Main FastAPI application for the Video Idea Evaluator."""
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import ConfigurationError, IdeaEvaluatorBaseException
from app.api import evaluation_router, opportunities_router, health_router
from app.config.templates import get_template_engine
from app.utils.logging import CorrelatedLogger, LoggerSetup
from app.utils.response_helpers import ResponseHelper

# Setup logging
LoggerSetup.setup_logging()
logger = CorrelatedLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"{settings.api_title} v{settings.api_version} starting up")
    if not settings.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; analysis endpoints will fail with CONFIGURATION_ERROR")
    if not settings.openai_api_key:
        logger.info("OPENAI_API_KEY is not set; title suggestions will use fallback titles")
    try:
        get_template_engine().validate_configuration("title_generation")
    except ConfigurationError as e:
        logger.error(f"Title prompt configuration is invalid, suggestions will use fallback titles: {e.message}")
    yield
    logger.info("Application shutting down")

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "tryItOutEnabled": True,
    }
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handler for custom exceptions
@app.exception_handler(IdeaEvaluatorBaseException)
async def idea_evaluator_exception_handler(request, exc: IdeaEvaluatorBaseException):
    """Handle custom service exceptions."""
    return ResponseHelper.create_error_from_exception(exc)

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle FastAPI HTTP exceptions."""
    return ResponseHelper.create_error_response(
        error_code="HTTP_ERROR",
        message=str(exc.detail),
        status_code=exc.status_code
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}: {str(exc)}")

    return ResponseHelper.create_error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        status_code=500
    )

# Include routers
app.include_router(health_router)
app.include_router(evaluation_router)
app.include_router(opportunities_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
