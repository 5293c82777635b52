"""Unit tests for site configuration resolution."""

import pytest

from scribe.contexts.rendering.config import load_site_config
from scribe.contexts.rendering.defaults import DEFAULT_PASSTHROUGH
from scribe.contexts.rendering.exceptions import SiteConfigError


@pytest.fixture(autouse=True)
def clear_scribe_env(monkeypatch):
    for var in ("SCRIBE_SITE_CONFIG", "SCRIBE_INPUT_DIR", "SCRIBE_OUTPUT_DIR", "SCRIBE_TEMPLATES_PATH"):
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
def test_defaults(tmp_path):
    config = load_site_config(project_root=tmp_path)

    assert config.project_root == tmp_path.resolve()
    assert config.input_dir == tmp_path.resolve() / "src"
    assert config.output_dir == tmp_path.resolve() / "_site"
    assert config.musings_glob == "musings/*.md"
    assert config.content_pattern == "**/*.md"
    assert config.templates_dir is None
    assert config.passthrough == DEFAULT_PASSTHROUGH


@pytest.mark.unit
def test_yaml_overrides_defaults(tmp_path):
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        "output_dir: public\n"
        "passthrough:\n"
        "  favicon.ico: favicon.ico\n"
        "  humans.txt: null\n",
        encoding="utf-8",
    )

    config = load_site_config(config_path)

    assert config.project_root == tmp_path.resolve()
    assert config.output_dir == tmp_path.resolve() / "public"
    assert config.passthrough["favicon.ico"] == "favicon.ico"
    assert "humans.txt" not in config.passthrough
    assert config.passthrough["CNAME"] == "CNAME"


@pytest.mark.unit
def test_passthrough_can_be_disabled(tmp_path):
    config_path = tmp_path / "site.yaml"
    config_path.write_text("passthrough: null\n", encoding="utf-8")

    assert load_site_config(config_path).passthrough == {}


@pytest.mark.unit
def test_explicit_overrides_win(tmp_path, monkeypatch):
    monkeypatch.setenv("SCRIBE_OUTPUT_DIR", "from_env")

    config = load_site_config(
        overrides={"output_dir": tmp_path / "out", "input_dir": None},
        project_root=tmp_path,
    )

    assert config.output_dir == tmp_path / "out"
    assert config.input_dir == tmp_path.resolve() / "src"


@pytest.mark.unit
def test_environment_overrides_yaml(tmp_path, monkeypatch):
    config_path = tmp_path / "site.yaml"
    config_path.write_text("input_dir: content\n", encoding="utf-8")
    monkeypatch.setenv("SCRIBE_INPUT_DIR", "pages")

    assert load_site_config(config_path).input_dir == tmp_path.resolve() / "pages"


@pytest.mark.unit
def test_templates_dir_resolved(tmp_path):
    config = load_site_config(overrides={"templates_dir": "theme"}, project_root=tmp_path)

    assert config.templates_dir == tmp_path.resolve() / "theme"


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    config_path = tmp_path / "site.yaml"
    config_path.write_text("outptu_dir: typo\n", encoding="utf-8")

    with pytest.raises(SiteConfigError, match="outptu_dir"):
        load_site_config(config_path)


@pytest.mark.unit
def test_missing_config_file(tmp_path):
    with pytest.raises(SiteConfigError, match="not found"):
        load_site_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_non_mapping_passthrough_rejected(tmp_path):
    config_path = tmp_path / "site.yaml"
    config_path.write_text("passthrough: [CNAME]\n", encoding="utf-8")

    with pytest.raises(SiteConfigError):
        load_site_config(config_path)
