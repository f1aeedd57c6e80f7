"""Configuration for the view renderer and the HTTP application."""

from collections.abc import Callable, Mapping
from functools import cached_property
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class RenderConfig(BaseModel):
    """Directory conventions and engine options for a ViewRenderer.

    Every field has a default, so any subset of fields (or none at all) is a
    valid configuration. Fields can be given in snake_case or camelCase
    (``default_layout`` or ``defaultLayout``). Instances are immutable.
    """

    base_dir: str = Field(default="views", description="Root directory for all templates")
    extname: str = Field(default=".hbs", min_length=1, description="Template filename suffix")
    layouts_dir: str = Field(default="layouts/", description="Layouts directory, relative to base_dir")
    partials_dir: str = Field(default="partials/", description="Partials directory, relative to base_dir")
    cache_partials: bool = Field(default=True, description="Register partials once instead of on every render")
    default_layout: str | None = Field(default="main", description="Layout used when none is requested")
    helpers: dict[str, Callable[..., Any]] | None = Field(default=None, description="Helpers registered at construction")
    compiler_options: dict[str, Any] | None = Field(default=None, description="Forwarded to the engine's compile step")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @field_validator("default_layout", mode="after")
    @classmethod
    def validate_default_layout(cls, v: str | None) -> str | None:
        """An empty layout name disables layouts."""
        return v or None

    @classmethod
    def from_options(cls, options: "RenderConfig | Mapping[str, Any] | None" = None) -> "RenderConfig":
        """Merge caller-supplied fields over the defaults.

        Args:
            options: A complete config, a mapping of (possibly partial) fields, or None

        Returns:
            RenderConfig with every field defined
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


class Settings(BaseSettings):
    """Settings for the HTTP application.

    Read from ``VIEWS_*`` environment variables or a ``.env`` file. Only the
    application uses these; a ViewRenderer is configured with RenderConfig.
    """

    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    log_level: str = Field(default="INFO", description="Root logging level")
    log_file: str | None = Field(default=None, description="JSON log file, console only when unset")

    base_dir: str = Field(default="views", min_length=1)
    extname: str = Field(default=".hbs", min_length=1)
    layouts_dir: str = Field(default="layouts/")
    partials_dir: str = Field(default="partials/")
    cache_partials: bool = Field(default=True)
    default_layout: str = Field(default="main")

    model_config = SettingsConfigDict(
        env_prefix="VIEWS_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @cached_property
    def render_config(self) -> RenderConfig:
        """RenderConfig built from the template settings."""
        return RenderConfig(
            base_dir=self.base_dir,
            extname=self.extname,
            layouts_dir=self.layouts_dir,
            partials_dir=self.partials_dir,
            cache_partials=self.cache_partials,
            default_layout=self.default_layout,
        )


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the singleton Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
