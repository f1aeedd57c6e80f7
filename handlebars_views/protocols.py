"""Protocol definitions for the renderer's collaborators."""

from collections.abc import AsyncIterator, Mapping
from typing import Any, Protocol


class CompiledTemplate(Protocol):
    """A template ready to be invoked with a context."""

    def __call__(self, context: Mapping[str, Any] | None = None) -> str: ...


class TemplateEngine(Protocol):
    """Compiles template source into an invocable template.

    Helpers and partials are not passed to the engine per call; engines read
    them from the TemplateRegistry they were created with.
    """

    def compile(self, source: str, options: Mapping[str, Any] | None = None) -> CompiledTemplate:
        """Compile template source.

        Args:
            source: Decoded template text
            options: Engine-specific compiler options, forwarded unmodified

        Returns:
            Callable rendering the template for a context
        """
        ...


class FileStore(Protocol):
    """Reads template files and enumerates template directories."""

    async def read(self, path: str) -> bytes:
        """Return the full contents of ``path``."""
        ...

    def walk(self, directory: str, extname: str) -> AsyncIterator[str]:
        """Yield every file below ``directory`` whose name ends with ``extname``."""
        ...
