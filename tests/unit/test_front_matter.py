"""Unit tests for front matter parsing and ContentItem construction."""

import pytest

from scribe.contexts.content.content_item import (
    ContentItem,
    coerce_part,
    derive_url,
    normalize_tags,
)
from scribe.contexts.content.exceptions import FrontMatterError
from scribe.contexts.content.front_matter import parse_front_matter


@pytest.mark.unit
def test_parse_front_matter_basic():
    text = "---\ntitle: Setting Up\nseriesId: galactic-archives\npart: 1\n---\nBody text.\n"

    data, body = parse_front_matter(text)

    assert data == {"title": "Setting Up", "seriesId": "galactic-archives", "part": 1}
    assert body == "Body text.\n"


@pytest.mark.unit
def test_parse_front_matter_absent():
    text = "# Just markdown\n\n---\n\nwith a rule"

    data, body = parse_front_matter(text)

    assert data == {}
    assert body == text


@pytest.mark.unit
def test_parse_front_matter_empty_block():
    data, body = parse_front_matter("---\n---\nBody")

    assert data == {}
    assert body == "Body"


@pytest.mark.unit
def test_parse_front_matter_keeps_dates_as_text():
    data, _ = parse_front_matter("---\ndate: 2024-02-08\n---\n")

    assert str(data["date"]) == "2024-02-08"


@pytest.mark.unit
def test_parse_front_matter_does_not_resolve_interpolations():
    """Template syntax in author text is left untouched."""
    data, _ = parse_front_matter("---\ntitle: Using ${value} in templates\n---\n")

    assert data["title"] == "Using ${value} in templates"


@pytest.mark.unit
def test_parse_front_matter_handles_crlf_and_bom():
    text = "\ufeff---\r\ntitle: Windows\r\n---\r\nBody"

    data, body = parse_front_matter(text)

    assert data["title"] == "Windows"
    assert body == "Body"


@pytest.mark.unit
def test_parse_front_matter_malformed_yaml():
    with pytest.raises(FrontMatterError) as exc_info:
        parse_front_matter("---\ntitle: [unclosed\n---\nBody", source_path="broken.md")

    assert "broken.md" in str(exc_info.value)
    assert exc_info.value.snippet.startswith("title:")


@pytest.mark.unit
def test_parse_front_matter_rejects_list():
    with pytest.raises(FrontMatterError):
        parse_front_matter("---\n- one\n- two\n---\nBody")


@pytest.mark.unit
def test_front_matter_error_is_value_error():
    assert issubclass(FrontMatterError, ValueError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "source_path, expected",
    [
        ("index.md", "/"),
        ("musings/hello-world.md", "/musings/hello-world/"),
        ("musings/index.md", "/musings/"),
        ("series/galactic-archives/setup.md", "/series/galactic-archives/setup/"),
    ],
)
def test_derive_url(source_path, expected):
    assert derive_url(source_path) == expected


@pytest.mark.unit
def test_normalize_tags():
    assert normalize_tags(None) == ()
    assert normalize_tags("post") == ("post",)
    assert normalize_tags(["post", "series"]) == ("post", "series")


@pytest.mark.unit
def test_content_item_from_front_matter():
    data = {
        "title": "Setting Up",
        "date": "2024-02-08",
        "seriesId": "galactic-archives",
        "part": 1,
        "tags": ["post"],
    }

    item = ContentItem.from_front_matter("series/galactic-archives/setup.md", data, "Body")

    assert item.url == "/series/galactic-archives/setup/"
    assert item.title == "Setting Up"
    assert item.date == "2024-02-08"
    assert item.series_id == "galactic-archives"
    assert item.part == 1
    assert item.tags == ("post",)
    assert item.body == "Body"
    assert not item.is_series_overview
    assert item.output_stem == "series/galactic-archives/setup"


@pytest.mark.unit
def test_content_item_defaults():
    item = ContentItem.from_front_matter("index.md", {})

    assert item.url == "/"
    assert item.title == ""
    assert item.series_id is None
    assert item.part is None
    assert item.tags == ()
    assert item.output_stem == "index"


@pytest.mark.unit
def test_content_item_overview_tag():
    item = ContentItem.from_front_matter("series/x/index.md", {"seriesId": "x", "tags": "series"})

    assert item.is_series_overview
    assert item.has_tag("series")


@pytest.mark.unit
def test_content_item_permalink_overrides_url():
    item = ContentItem.from_front_matter("resume.md", {"permalink": "/cv/index.html"})

    assert item.url == "/cv/index.html"


@pytest.mark.unit
def test_content_item_from_file(tmp_path):
    posts = tmp_path / "musings"
    posts.mkdir()
    path = posts / "hello.md"
    path.write_text("---\ntitle: Hello\n---\nHi there\n", encoding="utf-8")

    item = ContentItem.from_file(path, tmp_path)

    assert item.source_path == "musings/hello.md"
    assert item.url == "/musings/hello/"
    assert item.title == "Hello"
    assert item.body == "Hi there\n"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [
        (2, 2),
        ("2", 2),
        (" 3 ", 3),
        (4.0, 4),
        (4.5, None),
        ("two", None),
        (True, None),
        (None, None),
        ([1], None),
    ],
)
def test_coerce_part(raw, expected):
    assert coerce_part(raw) == expected


@pytest.mark.unit
def test_content_item_coerces_series_fields():
    """Quoted parts and numeric series ids are normalized to int and str."""
    item = ContentItem.from_front_matter("a.md", {"seriesId": 2024, "part": "2"})

    assert item.series_id == "2024"
    assert item.part == 2


@pytest.mark.unit
def test_content_item_non_numeric_part_is_missing():
    item = ContentItem.from_front_matter("a.md", {"seriesId": "x", "part": "appendix"})

    assert item.part is None
