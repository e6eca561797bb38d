"""API routes module."""
from lifttrax.api.routes.health import router as health_router
from lifttrax.api.routes.waves import router as waves_router

__all__ = [
    "health_router",
    "waves_router",
]
