"""HTTP route groups for the gateway."""

from .health import router as health_router
from .static_assets import router as static_router
from .summarize import router as summarize_router
from .transcribe import router as transcribe_router

__all__ = ["health_router", "static_router", "summarize_router", "transcribe_router"]
