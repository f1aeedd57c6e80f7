"""Render views inside layouts from a directory of templates.

Directory convention (relative to ``base_dir``)::

    <view><extname>                    views
    <layouts_dir>/<layout><extname>    layouts
    <partials_dir>/**/*<extname>       partials, registered as "dir/name"

Example:
    renderer = ViewRenderer({"base_dir": "templates"})
    html = await renderer.render_view("index", {"title": "Home"})
"""

from collections.abc import Mapping
from typing import Any

from handlebars_views.config import RenderConfig
from handlebars_views.engines import HandlebarsEngine
from handlebars_views.file_store import LocalFileStore
from handlebars_views.logging_config import get_logger, log_with_context
from handlebars_views.paths import join_path, layout_path, normalize_path, partial_name, view_path
from handlebars_views.protocols import FileStore, TemplateEngine
from handlebars_views.registry import TemplateRegistry, default_registry
from handlebars_views.state_managers import PartialsStateManager

logger = get_logger(__name__)


class ViewRenderer:
    """Renders named views, wraps them in layouts and registers partials.

    Helpers from the configuration are registered into the registry when the
    renderer is created. Partials are registered before the first render, or
    before every render when ``cache_partials`` is off. Compiled templates are
    not cached: every render reads and compiles the files again.
    """

    def __init__(
        self,
        config: RenderConfig | Mapping[str, Any] | None = None,
        *,
        registry: TemplateRegistry | None = None,
        engine: TemplateEngine | None = None,
        file_store: FileStore | None = None,
    ):
        """Create a renderer.

        Args:
            config: RenderConfig or mapping of fields merged over the defaults
            registry: Helper/partial registry (defaults to the process-wide one)
            engine: Template engine (defaults to Handlebars on ``registry``)
            file_store: File access (defaults to the local disk)
        """
        self.config = RenderConfig.from_options(config)
        self.registry = registry if registry is not None else default_registry
        self.engine = engine if engine is not None else HandlebarsEngine(self.registry)
        self.file_store = file_store if file_store is not None else LocalFileStore()
        self.partials_state = PartialsStateManager()

        if self.config.helpers:
            for name, helper in self.config.helpers.items():
                self.registry.register_helper(name, helper)

    async def render_view(
        self,
        view: str,
        context: Mapping[str, Any] | None = None,
        layout: str | None = None,
    ) -> str:
        """Render a view, wrapped in a layout unless layouts are disabled.

        The rendered view is passed to the layout as ``body``, replacing any
        ``body`` key in ``context``.

        Args:
            view: View name, without extension, relative to base_dir
            context: Data passed to the view and the layout
            layout: Layout name, defaults to ``config.default_layout``

        Returns:
            Rendered HTML, or an empty string when ``view`` is empty
        """
        if not view:
            log_with_context(
                logger,
                "warning",
                "View name is empty, nothing to render",
                event_type="view_name_empty",
            )
            return ""

        config = self.config

        if self.partials_state.needs_registration(config.cache_partials):
            await self.register_partials()

        body = await self.render(view_path(config.base_dir, view, config.extname), context)

        layout = layout or config.default_layout
        if not layout:
            return body

        return await self.render(
            layout_path(config.base_dir, config.layouts_dir, layout, config.extname),
            {**(context or {}), "body": body},
        )

    async def render(self, path: str, context: Mapping[str, Any] | None = None) -> str:
        """Read, compile and render a single template file.

        Args:
            path: Path of the template file
            context: Data passed to the template

        Returns:
            Rendered text

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
            Exception: Whatever the template engine raises for bad templates
        """
        source = (await self.file_store.read(path)).decode("utf-8")
        template = self.engine.compile(source, self.config.compiler_options)
        return template(context)

    async def register_partials(self) -> int:
        """Register every partial below ``base_dir/partials_dir``.

        Returns:
            Number of partials registered (0 when the directory is missing)
        """
        config = self.config
        paths = await self._get_templates_path(join_path(config.base_dir, config.partials_dir))

        for path in paths:
            name = partial_name(path, config.base_dir, config.partials_dir, config.extname)
            source = (await self.file_store.read(path)).decode("utf-8")
            self.registry.register_partial(name, source)

        self.partials_state.mark_registered()
        log_with_context(
            logger,
            "debug",
            "Partials registered",
            count=len(paths),
            partials_dir=config.partials_dir,
            event_type="partials_registered",
        )
        return len(paths)

    async def _get_templates_path(self, directory: str) -> list[str]:
        return [normalize_path(path) async for path in self.file_store.walk(directory, self.config.extname)]
