"""
Site Configuration Resolution

Builds the configuration for one site build by layering, in order:
1. Built-in defaults (defaults.py)
2. Site YAML file (SCRIBE_SITE_CONFIG or an explicit path)
3. Environment variables (SCRIBE_INPUT_DIR, SCRIBE_OUTPUT_DIR, SCRIBE_TEMPLATES_PATH)
4. Explicit overrides (e.g., command-line options)

Later layers override earlier ones. Passthrough mappings merge key by key; set an
entry's destination to null to drop a default copy, or set `passthrough: null`
to disable passthrough copy entirely.

Examples:
    >>> config = load_site_config(Path("site.yaml"))
    >>> config = load_site_config(overrides={"output_dir": "public"})
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from scribe.contexts.rendering.defaults import get_default_site_config
from scribe.contexts.rendering.exceptions import SiteConfigError

load_dotenv()

# Environment variable -> config key
ENV_OVERRIDES = {
    "SCRIBE_INPUT_DIR": "input_dir",
    "SCRIBE_OUTPUT_DIR": "output_dir",
    "SCRIBE_TEMPLATES_PATH": "templates_dir",
}


@dataclass
class SiteConfig:
    """Resolved configuration for one site build. All paths are absolute."""

    project_root: Path
    input_dir: Path
    output_dir: Path
    content_pattern: str
    musings_glob: str
    templates_dir: Optional[Path] = None
    passthrough: Dict[str, str] = field(default_factory=dict)


def _env_overrides() -> Dict[str, Any]:
    return {key: os.environ[var] for var, key in ENV_OVERRIDES.items() if os.environ.get(var)}


def _load_yaml_layer(config_path: Path) -> DictConfig:
    if not config_path.exists():
        raise SiteConfigError(f"Site config not found: {config_path}")

    try:
        conf = OmegaConf.load(config_path)
    except Exception as e:
        raise SiteConfigError(f"Could not read site config {config_path}: {e}") from e

    if not isinstance(conf, DictConfig):
        raise SiteConfigError(f"Site config must be a mapping: {config_path}")
    return conf


def load_site_config(
    config_path: Path = None,
    overrides: Dict[str, Any] = None,
    project_root: Path = None,
) -> SiteConfig:
    """
    Resolve the site configuration.

    Args:
        config_path: Site YAML file. Defaults to SCRIBE_SITE_CONFIG when set.
        overrides: Highest-priority values; keys with None values are ignored
        project_root: Base for relative paths. Defaults to the config file's
                      directory, or the current working directory.

    Returns:
        SiteConfig with absolute paths

    Raises:
        SiteConfigError: If the config file is unreadable, has unknown keys, or
                         has a passthrough value that is not a mapping
    """
    defaults = get_default_site_config()

    if config_path is None and os.getenv("SCRIBE_SITE_CONFIG"):
        config_path = Path(os.getenv("SCRIBE_SITE_CONFIG"))

    layers = [OmegaConf.create(defaults)]
    if config_path is not None:
        layers.append(_load_yaml_layer(config_path))
    layers.append(OmegaConf.create(_env_overrides()))
    if overrides:
        cleaned = {
            key: str(value) if isinstance(value, Path) else value
            for key, value in overrides.items()
            if value is not None
        }
        layers.append(OmegaConf.create(cleaned))

    for layer in layers[1:]:
        unknown = set(layer.keys()) - set(defaults)
        if unknown:
            raise SiteConfigError(
                f"Unknown site config key(s): {sorted(unknown)}. Valid keys: {sorted(defaults)}"
            )

    try:
        merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    except Exception as e:
        raise SiteConfigError(f"Invalid site config: {e}") from e

    passthrough = merged["passthrough"] or {}
    if not isinstance(passthrough, dict):
        raise SiteConfigError(
            f"'passthrough' must map source paths to destinations, got {type(passthrough).__name__}"
        )

    if project_root is None:
        project_root = config_path.parent if config_path is not None else Path.cwd()
    project_root = project_root.resolve()

    templates_dir = merged["templates_dir"]

    return SiteConfig(
        project_root=project_root,
        input_dir=project_root / merged["input_dir"],
        output_dir=project_root / merged["output_dir"],
        content_pattern=merged["content_pattern"],
        musings_glob=merged["musings_glob"],
        templates_dir=project_root / templates_dir if templates_dir else None,
        passthrough={
            str(source): str(destination)
            for source, destination in passthrough.items()
            if destination is not None
        },
    )
