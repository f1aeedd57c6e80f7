"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from handlebars_views import __version__
from handlebars_views.config import Settings, get_settings
from handlebars_views.core.lifespan import lifespan
from handlebars_views.middleware.error_handlers import register_error_handlers
from handlebars_views.routers import health_router, view_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the singleton from get_settings()

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Handlebars Views",
        description="Serves Handlebars views rendered inside layouts.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)

    # Health first: the view router's catch-all path would shadow it.
    app.include_router(health_router.router, tags=["health"])
    app.include_router(view_router.router, tags=["views"])

    return app
