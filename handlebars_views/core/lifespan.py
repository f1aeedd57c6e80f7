"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from handlebars_views import __version__
from handlebars_views.logging_config import get_logger, log_with_context
from handlebars_views.renderer import ViewRenderer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the view renderer on startup and log shutdown.

    Exceptions raised while the app is running are logged and re-raised.
    """
    settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting Handlebars Views application",
        version=__version__,
        base_dir=settings.base_dir,
        event_type="app_startup",
    )

    app.state.view_renderer = ViewRenderer(settings.render_config)
    log_with_context(
        logger,
        "info",
        "View renderer initialized",
        cache_partials=settings.cache_partials,
        default_layout=settings.default_layout,
        event_type="view_renderer_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Handlebars Views application",
            event_type="app_shutdown",
        )
