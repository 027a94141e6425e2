"""
Controllers Package - Presentation Layer

FastAPI routers translating health reports into HTTP responses.
"""

from .healthcheck_controller import router as healthcheck_router

__all__ = ["healthcheck_router"]
