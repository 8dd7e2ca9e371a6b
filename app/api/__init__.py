"""API module initialization."""
from .evaluation import router as evaluation_router
from .opportunities import router as opportunities_router
from .health import router as health_router

__all__ = ["evaluation_router", "opportunities_router", "health_router"]
