"""Shared catalog of named template helpers and partials.

Every template compiled by an engine sees the helpers and partials of the
registry the engine was created with. ``default_registry`` is the
process-wide instance used unless a renderer is given its own registry, so
renderers sharing it also share (and overwrite) each other's entries.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any


class TemplateRegistry:
    """Named helpers and raw partial sources.

    Entries are only ever added or replaced (last write wins); nothing is
    removed implicitly.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._helpers: dict[str, Callable[..., Any]] = {}
        self._partials: dict[str, str] = {}

    @property
    def helpers(self) -> Mapping[str, Callable[..., Any]]:
        """Read-only view of the registered helpers."""
        return MappingProxyType(self._helpers)

    @property
    def partials(self) -> Mapping[str, str]:
        """Read-only view of the registered partial sources."""
        return MappingProxyType(self._partials)

    def register_helper(self, name: str, helper: Callable[..., Any]) -> None:
        self._helpers[name] = helper

    def register_partial(self, name: str, source: str) -> None:
        """Register a partial as uncompiled source text."""
        self._partials[name] = source

    def get_partial(self, name: str) -> str | None:
        return self._partials.get(name)


default_registry = TemplateRegistry()
