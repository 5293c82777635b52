#!/usr/bin/env python3
"""
Site Build CLI

Builds series navigation output for a static site: the series listing page,
one navigation fragment per series page, the JSON navigation manifest, and
passthrough copies of static files.

Usage:
    # Build with defaults (src/ -> _site/, site YAML from SCRIBE_SITE_CONFIG if set)
    python scripts/build_site.py

    # Explicit site config and output directory
    python scripts/build_site.py --config site.yaml --output public
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from scribe.contexts.rendering import SiteConfigError, build_site, load_site_config
from scribe.utils.logger import LOGS_PATH
from scribe.utils.timestamp import now

app = typer.Typer(
    help="Build series navigation output for a static site",
    add_completion=False,
)


@app.command()
def main(
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Site YAML config (defaults to SCRIBE_SITE_CONFIG)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    input_dir: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="Content input directory"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the build log (defaults to a timestamped dir)"),
    ] = None,
):
    """
    Build the site's series navigation.

    Examples:\n
        $ build_site.py

        $ build_site.py --config site.yaml --output public
    """
    try:
        site_config = load_site_config(
            config,
            overrides={"input_dir": input_dir, "output_dir": output_dir},
        )
    except SiteConfigError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log_dir is None:
        log_dir = LOGS_PATH / f"build_{now()}"

    result = build_site(site_config, log_dir=log_dir)

    if not result.success:
        typer.secho(f"✗ Build failed: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Build completed", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {result.output_path}")
    typer.echo(f"  Items: {result.items_loaded}, series: {result.series_count}")


if __name__ == "__main__":
    app()
