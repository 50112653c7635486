"""Dashboard API module."""

from .routes import router
from .health import router as health_router
from .middleware import CORSMiddleware, RequestLoggingMiddleware

__all__ = ["router", "health_router", "CORSMiddleware", "RequestLoggingMiddleware"]
