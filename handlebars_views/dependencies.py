"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from handlebars_views.renderer import ViewRenderer


async def get_view_renderer(request: Request) -> ViewRenderer:
    """
    Get the shared view renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The ViewRenderer created during startup.

    Raises:
        RuntimeError: If the view renderer is not initialized.
    """
    renderer: ViewRenderer | None = getattr(request.app.state, "view_renderer", None)

    if renderer is None:
        raise RuntimeError("View renderer not initialized.")

    return renderer
