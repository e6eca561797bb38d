"""Main FastAPI application."""
from fastapi import FastAPI

from lifttrax.config.settings import get_settings
from lifttrax.core.error_handlers import domain_error_handler
from lifttrax.core.exceptions import DomainError
from lifttrax.core.logging import configure_logging
from lifttrax.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Generates conjugate-periodization training waves from an exercise catalog",
        version="0.1.0",
        debug=settings.debug,
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(DomainError, domain_error_handler)

    from lifttrax.api.routes import health_router, waves_router

    app.include_router(health_router)
    app.include_router(waves_router, prefix="/waves", tags=["Waves"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("lifttrax.main:app", host="0.0.0.0", port=8000, reload=True)
