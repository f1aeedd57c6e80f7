"""Handlebars Views - directory-driven view rendering for web applications"""

from importlib.metadata import PackageNotFoundError, version

from handlebars_views.config import RenderConfig
from handlebars_views.registry import TemplateRegistry, default_registry
from handlebars_views.renderer import ViewRenderer

try:
    __version__ = version("handlebars-views")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = ["RenderConfig", "TemplateRegistry", "ViewRenderer", "default_registry", "__version__"]
