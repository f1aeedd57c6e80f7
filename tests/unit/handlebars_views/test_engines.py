"""Unit tests for the template engines."""

import pytest

from handlebars_views.engines import HandlebarsEngine, Jinja2Engine
from handlebars_views.registry import TemplateRegistry


@pytest.fixture
def registry():
    return TemplateRegistry()


class TestHandlebarsEngine:
    """Tests for the pybars-backed engine."""

    def test_render_context(self, registry):
        template = HandlebarsEngine(registry).compile("Hello {{name}}")

        assert template({"name": "World"}) == "Hello World"

    def test_double_stash_escapes_html(self, registry):
        template = HandlebarsEngine(registry).compile("{{value}}|{{{value}}}")

        assert template({"value": "<b>"}) == "&lt;b&gt;|<b>"

    def test_missing_context_renders_as_empty(self, registry):
        template = HandlebarsEngine(registry).compile("Hello {{name}}!")

        assert template(None) == "Hello !"

    def test_registry_helpers_available(self, registry):
        registry.register_helper("shout", lambda this, value: value.upper())
        template = HandlebarsEngine(registry).compile("{{shout name}}")

        assert template({"name": "ann"}) == "ANN"

    def test_helper_registered_after_compile_is_visible(self, registry):
        template = HandlebarsEngine(registry).compile("{{shout name}}")
        registry.register_helper("shout", lambda this, value: value.upper())

        assert template({"name": "bo"}) == "BO"

    def test_partials_from_registry(self, registry):
        registry.register_partial("header", "<h1>{{title}}</h1>")
        template = HandlebarsEngine(registry).compile("{{> header}}<p>x</p>")

        assert template({"title": "Home"}) == "<h1>Home</h1><p>x</p>"

    def test_reregistered_partial_is_recompiled(self, registry):
        engine = HandlebarsEngine(registry)
        registry.register_partial("header", "first")
        template = engine.compile("{{> header}}")
        assert template({}) == "first"

        registry.register_partial("header", "second")

        assert template({}) == "second"

    def test_unchanged_partial_compiled_once(self, registry):
        engine = HandlebarsEngine(registry)
        registry.register_partial("header", "<h1>{{title}}</h1>")
        template = engine.compile("{{> header}}")

        template({"title": "a"})
        first = engine._compiled_partials["header"][1]
        template({"title": "b"})

        assert engine._compiled_partials["header"][1] is first


class TestJinja2Engine:
    """Tests for the Jinja2-backed engine."""

    def test_render_context(self, registry):
        template = Jinja2Engine(registry).compile("Hello {{ name }}")

        assert template({"name": "World"}) == "Hello World"

    def test_autoescape(self, registry):
        template = Jinja2Engine(registry).compile("{{ value }}|{{ value|safe }}")

        assert template({"value": "<b>"}) == "&lt;b&gt;|<b>"

    def test_missing_context_renders_as_empty(self, registry):
        template = Jinja2Engine(registry).compile("Hello {{ name }}!")

        assert template() == "Hello !"

    def test_nested_partial_include(self, registry):
        registry.register_partial("nested/card", "<div>{{ text }}</div>")
        template = Jinja2Engine(registry).compile('{% include "nested/card" %}')

        assert template({"text": "hi"}) == "<div>hi</div>"

    def test_helpers_are_globals(self, registry):
        registry.register_helper("shout", lambda value: value.upper())
        template = Jinja2Engine(registry).compile("{{ shout(name) }}")

        assert template({"name": "ann"}) == "ANN"

    def test_reregistered_partial_reloaded(self, registry):
        engine = Jinja2Engine(registry)
        registry.register_partial("header", "first")
        template = engine.compile('{% include "header" %}')
        assert template() == "first"

        registry.register_partial("header", "second")

        assert template() == "second"

    def test_unknown_partial_raises(self, registry):
        from jinja2 import TemplateNotFound

        template = Jinja2Engine(registry).compile('{% include "missing" %}')

        with pytest.raises(TemplateNotFound):
            template()
