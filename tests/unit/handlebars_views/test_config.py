"""Unit tests for configuration."""

from unittest.mock import patch

import pytest

from handlebars_views.config import RenderConfig, Settings, get_settings


def test_render_config_defaults():
    """Test RenderConfig has every default defined."""
    config = RenderConfig()

    assert config.base_dir == "views"
    assert config.extname == ".hbs"
    assert config.layouts_dir == "layouts/"
    assert config.partials_dir == "partials/"
    assert config.cache_partials is True
    assert config.default_layout == "main"
    assert config.helpers is None
    assert config.compiler_options is None


def test_from_options_none_is_default():
    """Test missing options yield the pure default."""
    assert RenderConfig.from_options(None) == RenderConfig()


def test_from_options_merges_over_defaults():
    """Test set fields override and unset fields fall back."""
    config = RenderConfig.from_options({"base_dir": "templates", "cache_partials": False})

    assert config.base_dir == "templates"
    assert config.cache_partials is False
    assert config.extname == ".hbs"
    assert config.default_layout == "main"


def test_from_options_accepts_camel_case():
    """Test camelCase field names are accepted."""
    config = RenderConfig.from_options({"baseDir": "site", "defaultLayout": "wide", "cachePartials": False})

    assert config.base_dir == "site"
    assert config.default_layout == "wide"
    assert config.cache_partials is False


def test_from_options_returns_existing_config():
    """Test a RenderConfig is used as-is."""
    config = RenderConfig(base_dir="x")

    assert RenderConfig.from_options(config) is config


def test_empty_default_layout_disables_layout():
    """Test an empty layout name is stored as None."""
    assert RenderConfig(default_layout="").default_layout is None
    assert RenderConfig(default_layout=None).default_layout is None


def test_empty_extname_rejected():
    """Test extname must not be empty."""
    with pytest.raises(ValueError):
        RenderConfig(extname="")


def test_unknown_field_rejected():
    """Test misspelled fields raise instead of being ignored."""
    with pytest.raises(ValueError):
        RenderConfig.from_options({"layoutDirectory": "x"})


def test_render_config_is_immutable():
    """Test RenderConfig cannot be modified after construction."""
    config = RenderConfig()

    with pytest.raises(ValueError):
        config.base_dir = "other"


def test_helpers_and_compiler_options_kept():
    """Test helpers and compiler options are stored unchanged."""

    def shout(this, value):
        return value.upper()

    config = RenderConfig(helpers={"shout": shout}, compiler_options={"path": "x"})

    assert config.helpers == {"shout": shout}
    assert config.compiler_options == {"path": "x"}


def test_settings_defaults():
    """Test Settings defaults match RenderConfig defaults."""
    settings = Settings(_env_file=None)

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.render_config == RenderConfig()


def test_settings_env_loading():
    """Test settings load from VIEWS_* environment variables."""
    with patch.dict(
        "os.environ",
        {
            "VIEWS_BASE_DIR": "/srv/templates",
            "VIEWS_CACHE_PARTIALS": "false",
            "VIEWS_DEFAULT_LAYOUT": "site",
            "VIEWS_API_PORT": "9000",
            "VIEWS_LOG_LEVEL": "debug",
        },
    ):
        settings = Settings(_env_file=None)

        assert settings.api_port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.render_config.base_dir == "/srv/templates"
        assert settings.render_config.cache_partials is False
        assert settings.render_config.default_layout == "site"


def test_settings_invalid_log_level():
    """Test unknown log levels are rejected."""
    with pytest.raises(ValueError):
        Settings(_env_file=None, log_level="LOUD")


def test_settings_invalid_port():
    """Test out-of-range ports are rejected."""
    with pytest.raises(ValueError):
        Settings(_env_file=None, api_port=70000)


def test_get_settings_singleton():
    """Test get_settings returns singleton instance."""
    assert get_settings() is get_settings()
