"""Unit tests for TemplateRegistry class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from scribe.contexts.content.content_item import ContentItem
from scribe.contexts.rendering.exceptions import TemplateRenderError
from scribe.contexts.rendering.registries import TemplateRegistry
from scribe.contexts.series.navigation import series_navigation
from scribe.contexts.series.snapshot import build_snapshot


def nav_for(path, items):
    snapshot = build_snapshot(items)
    return series_navigation(snapshot.find(path), snapshot)


@pytest.fixture
def series_items():
    return [
        ContentItem.from_front_matter(
            "series/ga/index.md", {"title": "Galactic Archives", "seriesId": "ga", "tags": ["series"]}
        ),
        ContentItem.from_front_matter("series/ga/intro.md", {"title": "Intro", "seriesId": "ga", "part": 0}),
        ContentItem.from_front_matter("series/ga/setup.md", {"title": "Setup <2>", "seriesId": "ga", "part": 1}),
    ]


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("series_nav")
    assert registry.is_cached("series_nav")

    template2 = registry.get_template("series_nav")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent")


@pytest.mark.unit
def test_render_missing_template_raises_render_error():
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render("nonexistent")

    assert exc_info.value.template_name == "nonexistent"
    assert isinstance(exc_info.value.original_error, TemplateNotFound)


@pytest.mark.unit
def test_render_undefined_variable_raises_render_error():
    """Missing context variables fail loudly instead of rendering blanks."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError):
        registry.render("series_nav")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("series_nav")

    assert isinstance(path, Path)
    assert path.name == "series_nav.html.jinja"


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("series_nav")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_render_member_navigation(series_items):
    """Member pages get overview, position, and previous/next links."""
    registry = TemplateRegistry()

    result = registry.render("series_nav", nav=nav_for("series/ga/intro.md", series_items))

    assert 'href="/series/ga/"' in result
    assert "part 1 of 2" in result
    assert 'rel="next"' in result
    assert 'rel="prev"' not in result


@pytest.mark.unit
def test_render_escapes_titles(series_items):
    registry = TemplateRegistry()

    result = registry.render("series_nav", nav=nav_for("series/ga/intro.md", series_items))

    assert "Setup &lt;2&gt;" in result
    assert "Setup <2>" not in result


@pytest.mark.unit
def test_render_overview_lists_members(series_items):
    registry = TemplateRegistry()

    result = registry.render("series_nav", nav=nav_for("series/ga/index.md", series_items))

    assert '<ol class="series-nav__members">' in result
    assert 'href="/series/ga/intro/"' in result
    assert 'href="/series/ga/setup/"' in result


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    """Templates can be overridden by pointing at another directory."""
    (tmp_path / "series_nav.html.jinja").write_text("{{ nav }}|custom\n", encoding="utf-8")
    registry = TemplateRegistry(tmp_path)

    assert registry.render("series_nav", nav="x") == "x|custom\n"


@pytest.mark.unit
def test_render_breadcrumbs(series_items):
    registry = TemplateRegistry()

    result = registry.render("series_nav", nav=nav_for("series/ga/setup.md", series_items))

    assert '<ol class="series-nav__breadcrumbs">' in result
    assert '<li><a href="/series/">series</a></li>' in result
    assert '<li><a href="/series/ga/setup/">setup</a></li>' in result
