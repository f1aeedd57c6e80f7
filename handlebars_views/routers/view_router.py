"""Page routes rendering views by name."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from handlebars_views.dependencies import get_view_renderer
from handlebars_views.renderer import ViewRenderer
from handlebars_views.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, renderer: ViewRenderer = Depends(get_view_renderer)):
    """Render the ``index`` view."""
    return await TemplateRenderer.render_view_response(request, renderer, "index")


@router.get("/{view:path}", response_class=HTMLResponse)
async def view_page(view: str, request: Request, renderer: ViewRenderer = Depends(get_view_renderer)):
    """Render any view by path; query parameters become the context.

    The ``layout`` query parameter selects a layout other than the default.
    """
    return await TemplateRenderer.render_view_response(request, renderer, view)
