"""
Rendering Context

Responsibilities:
- Resolves site configuration (defaults, site YAML, environment, overrides)
- Renders the series listing page and per-page navigation fragments
- Writes the JSON navigation manifest
- Copies passthrough static files into the output directory

Owns: Site configuration, HTML templates, output directory layout
Never: Decides series membership or ordering
"""

from scribe.contexts.rendering.builder import BuildResult, build_site
from scribe.contexts.rendering.config import SiteConfig, load_site_config
from scribe.contexts.rendering.exceptions import SiteConfigError, TemplateRenderError
from scribe.contexts.rendering.passthrough import copy_passthrough
from scribe.contexts.rendering.registries import TemplateRegistry

__all__ = [
    # Build orchestration
    "build_site",
    "BuildResult",
    # Configuration
    "SiteConfig",
    "load_site_config",
    "SiteConfigError",
    # Templates and static files
    "TemplateRegistry",
    "TemplateRenderError",
    "copy_passthrough",
]
