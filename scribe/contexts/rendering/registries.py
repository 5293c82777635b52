"""
Rendering Registries

Registry for loading, caching, and rendering the HTML templates used by the site build.
"""

from pathlib import Path
from typing import Any, Dict

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from scribe.contexts.rendering.exceptions import TemplateRenderError

TEMPLATES_PATH = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored as {templates_path}/{name}.html.jinja. Output is
    HTML-escaped and block tags do not leave blank lines behind.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding templates. Defaults to the
                           templates packaged with scribe.
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html.jinja",)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'series_nav')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, name: str, **context: Any) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateRenderError: If the template is missing, invalid, or fails to render
        """
        try:
            return self.get_template(name).render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render template",
                template_name=name,
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def get_template_path(self, name: str) -> Path:
        """
        Get the file path for a template.

        Args:
            name: Template name without suffix

        Returns:
            Path to template file
        """
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            name: Template name

        Returns:
            True if cached, False otherwise
        """
        return name in self._cache
