"""HTML responses for rendered views."""

from collections.abc import Mapping
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from jinja2 import TemplateError
from pybars import PybarsError

from handlebars_views.exceptions import TemplateRenderException, ViewNotFoundException
from handlebars_views.logging_config import get_logger, log_with_context
from handlebars_views.paths import is_relative_name, is_within
from handlebars_views.renderer import ViewRenderer

logger = get_logger(__name__)

LAYOUT_PARAM = "layout"


class TemplateRenderer:
    """Renders views into HTMLResponse objects."""

    @staticmethod
    def context_from_request(request: Request) -> dict[str, Any]:
        """Build a template context from query parameters, minus ``layout``."""
        return {key: value for key, value in request.query_params.items() if key != LAYOUT_PARAM}

    @staticmethod
    def check_names(renderer: ViewRenderer, view: str, layout: str | None) -> None:
        """Reject names that resolve outside the view tree.

        Views may not escape ``base_dir`` or point into the layouts or
        partials directories; layouts may not escape ``layouts_dir``.

        Raises:
            ViewNotFoundException: If a name is rejected
        """
        config = renderer.config
        view_allowed = (
            is_relative_name(view)
            and not is_within(view, config.layouts_dir)
            and not is_within(view, config.partials_dir)
        )
        layout_allowed = not layout or is_relative_name(layout)
        if view_allowed and layout_allowed:
            return

        log_with_context(
            logger,
            "warning",
            "Rejected view outside the view tree",
            view=view,
            layout=layout,
            event_type="view_name_rejected",
        )
        raise ViewNotFoundException(f"View '{view}' not found", details={"view": view})

    @staticmethod
    async def render_view_response(
        request: Request,
        renderer: ViewRenderer,
        view: str,
        context: Mapping[str, Any] | None = None,
        layout: str | None = None,
    ) -> HTMLResponse:
        """Render a view and wrap the result in an HTMLResponse.

        Args:
            request: FastAPI request object
            renderer: ViewRenderer from app state
            view: View name
            context: Template context, defaults to the query parameters
            layout: Layout name, defaults to the ``layout`` query parameter

        Returns:
            HTMLResponse with the rendered page

        Raises:
            ViewNotFoundException: If the view or layout is rejected or does not exist
            TemplateRenderException: If a template cannot be decoded, compiled or executed
        """
        if context is None:
            context = TemplateRenderer.context_from_request(request)
        if layout is None:
            layout = request.query_params.get(LAYOUT_PARAM)

        TemplateRenderer.check_names(renderer, view, layout)

        try:
            html = await renderer.render_view(view, context, layout)
        except FileNotFoundError as e:
            log_with_context(
                logger,
                "warning",
                "Template file not found",
                view=view,
                path=e.filename,
                event_type="view_not_found",
            )
            raise ViewNotFoundException(f"View '{view}' not found", details={"view": view}) from e
        except (PybarsError, TemplateError, UnicodeDecodeError) as e:
            log_with_context(
                logger,
                "error",
                "Template rendering failed",
                view=view,
                error=str(e),
                error_type=type(e).__name__,
                event_type="view_render_error",
            )
            raise TemplateRenderException(f"Failed to render view '{view}'", details={"view": view}) from e

        return HTMLResponse(content=html)
