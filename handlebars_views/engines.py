"""Template engines backed by third-party template libraries.

Both engines read helpers and partials from a TemplateRegistry at render
time, so anything registered after a template was compiled is still
visible to it.
"""

from collections.abc import Callable, Mapping
from typing import Any

from jinja2 import Environment, FunctionLoader
from pybars import Compiler

from handlebars_views.protocols import CompiledTemplate
from handlebars_views.registry import TemplateRegistry, default_registry


class HandlebarsEngine:
    """Handlebars templates compiled with pybars3.

    Helpers use pybars' calling convention: ``helper(this, *args)``.
    Partials are stored as source in the registry and compiled the first time
    a template is rendered after they were (re-)registered.
    """

    def __init__(self, registry: TemplateRegistry | None = None):
        self._registry = registry if registry is not None else default_registry
        self._compiler = Compiler()
        self._compiled_partials: dict[str, tuple[str, Callable[..., Any]]] = {}

    def compile(self, source: str, options: Mapping[str, Any] | None = None) -> CompiledTemplate:
        template = self._compiler.compile(source, **dict(options or {}))

        def render(context: Mapping[str, Any] | None = None) -> str:
            return str(
                template(
                    context if context is not None else {},
                    helpers=dict(self._registry.helpers),
                    partials=self._partials(),
                )
            )

        return render

    def _partials(self) -> dict[str, Callable[..., Any]]:
        compiled = {}
        for name, source in self._registry.partials.items():
            cached = self._compiled_partials.get(name)
            if cached is None or cached[0] != source:
                cached = (source, self._compiler.compile(source))
                self._compiled_partials[name] = cached
            compiled[name] = cached[1]
        return compiled


class Jinja2Engine:
    """Jinja2 templates with registry-backed includes.

    Partials are included by their registered name
    (``{% include "nested/card" %}``) and helpers are template globals.
    """

    def __init__(self, registry: TemplateRegistry | None = None, autoescape: bool = True):
        self._registry = registry if registry is not None else default_registry
        self._environment = Environment(
            loader=FunctionLoader(self._load_partial),
            autoescape=autoescape,
        )

    def _load_partial(self, name: str) -> tuple[str, None, Callable[[], bool]] | None:
        source = self._registry.get_partial(name)
        if source is None:
            return None
        # Stale once the partial is re-registered with different source.
        return source, None, lambda: self._registry.get_partial(name) == source

    def compile(self, source: str, options: Mapping[str, Any] | None = None) -> CompiledTemplate:
        template = self._environment.from_string(source, **dict(options or {}))

        def render(context: Mapping[str, Any] | None = None) -> str:
            self._environment.globals.update(self._registry.helpers)
            return template.render(dict(context or {}))

        return render
