"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from handlebars_views.file_store import LocalFileStore
from handlebars_views.registry import TemplateRegistry
from handlebars_views.renderer import ViewRenderer


class CountingFileStore(LocalFileStore):
    """LocalFileStore that records every read and directory walk."""

    def __init__(self):
        self.reads: list[str] = []
        self.walks: list[str] = []

    async def read(self, path: str) -> bytes:
        self.reads.append(path)
        return await super().read(path)

    async def walk(self, directory: str, extname: str):
        self.walks.append(directory)
        async for path in super().walk(directory, extname):
            yield path


def write_templates(base: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) below ``base``."""
    for relative, content in files.items():
        target = base / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return base


@pytest.fixture
def views_dir(tmp_path):
    """Template tree with a view, two layouts and nested partials."""
    return write_templates(
        tmp_path / "views",
        {
            "index.hbs": "Hello {{name}}",
            "greeting.hbs": "{{> header}}<p>{{name}}</p>",
            "layouts/main.hbs": "<body>{{{body}}}</body>",
            "layouts/alt.hbs": "<main>{{title}}|{{{body}}}</main>",
            "partials/header.hbs": "<h1>{{title}}</h1>",
            "partials/nested/card.hbs": "<div>{{text}}</div>",
            "partials/notes.txt": "not a template",
        },
    )


@pytest.fixture
def registry():
    """Fresh registry isolated from the process-wide default."""
    return TemplateRegistry()


@pytest.fixture
def file_store():
    """File store that counts reads and walks."""
    return CountingFileStore()


@pytest.fixture
def renderer(views_dir, registry, file_store):
    """ViewRenderer over ``views_dir`` with an isolated registry."""
    return ViewRenderer({"base_dir": str(views_dir)}, registry=registry, file_store=file_store)
