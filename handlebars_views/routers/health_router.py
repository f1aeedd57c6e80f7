"""Health endpoint."""

from fastapi import APIRouter, Depends

from handlebars_views import __version__
from handlebars_views.dependencies import get_view_renderer
from handlebars_views.models import HealthResponse
from handlebars_views.renderer import ViewRenderer

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(renderer: ViewRenderer = Depends(get_view_renderer)):
    """Basic health check endpoint."""
    return HealthResponse(
        status="ok",
        version=__version__,
        partials_registered=renderer.partials_state.is_registered,
    )
