"""Path helpers for the on-disk template layout.

All paths handed to the template machinery use ``/`` as separator so partial
names are identical on every platform.
"""

import os


def normalize_path(path: str) -> str:
    """Collapse redundant separators and dot segments, then use forward slashes."""
    return os.path.normpath(path).replace("\\", "/")


def join_path(*parts: str) -> str:
    """Join path segments and normalize the result."""
    return normalize_path(os.path.join(*parts))


def view_path(base_dir: str, view: str, extname: str) -> str:
    return join_path(base_dir, view + extname)


def layout_path(base_dir: str, layouts_dir: str, layout: str, extname: str) -> str:
    return join_path(base_dir, layouts_dir, layout + extname)


def partial_name(path: str, base_dir: str, partials_dir: str, extname: str) -> str:
    """Derive the registered name of a partial from its file path.

    The normalized ``base_dir/partials_dir`` prefix and the trailing
    ``extname`` are removed, so ``views/partials/nested/card.hbs`` becomes
    ``nested/card``.

    Args:
        path: Path of the partial file
        base_dir: Template root directory
        partials_dir: Partials directory relative to ``base_dir``
        extname: Template file suffix

    Returns:
        Slash-separated partial name
    """
    normalized = normalize_path(path)
    prefix = join_path(base_dir, partials_dir) + "/"
    return normalized.removeprefix(prefix).removesuffix(extname)


def is_relative_name(name: str) -> bool:
    """Return True if ``name`` cannot resolve outside the directory it is joined to."""
    normalized = normalize_path(name)
    return not (os.path.isabs(normalized) or normalized == ".." or normalized.startswith("../"))


def is_within(name: str, directory: str) -> bool:
    """Return True if ``name`` points into ``directory`` (both relative to the same root)."""
    normalized = normalize_path(name)
    prefix = normalize_path(directory)
    if prefix == ".":
        return False
    return normalized == prefix or normalized.startswith(prefix + "/")
