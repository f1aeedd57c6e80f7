"""Local file-system access for templates.

Blocking file-system calls run in a worker thread so a render never blocks
the event loop. No handle stays open between calls.
"""

import asyncio
import os
from collections.abc import AsyncIterator
from pathlib import Path


class LocalFileStore:
    """Reads template files from the local disk."""

    async def read(self, path: str) -> bytes:
        """Read the raw bytes of a file.

        Raises:
            FileNotFoundError: If the file does not exist
            PermissionError: If the file cannot be read
        """
        return await asyncio.to_thread(Path(path).read_bytes)

    async def walk(self, directory: str, extname: str) -> AsyncIterator[str]:
        """Yield paths of files below ``directory`` ending with ``extname``.

        A missing directory yields nothing. Order follows the directory walk
        and is not sorted.
        """
        paths = await asyncio.to_thread(self._find_files, directory, extname)
        for path in paths:
            yield path

    @staticmethod
    def _find_files(directory: str, extname: str) -> list[str]:
        found = []
        for root, _dirs, files in os.walk(directory):
            for name in files:
                if name.endswith(extname):
                    found.append(os.path.join(root, name))
        return found
