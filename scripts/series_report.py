#!/usr/bin/env python3
"""
Series Report CLI

Inspect how content is grouped into series without building the site.

Examples:
    # List every series with its ordered members
    python scripts/series_report.py list

    # Show navigation for one page
    python scripts/series_report.py nav series/galactic-archives/setup.md
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from scribe.contexts.rendering import SiteConfigError, load_site_config
from scribe.contexts.series import load_snapshot, series_navigation

app = typer.Typer(
    help="Inspect series grouping and navigation",
    add_completion=False,
)


def _load(config: Optional[Path], input_dir: Optional[Path]):
    try:
        site_config = load_site_config(config, overrides={"input_dir": input_dir})
    except SiteConfigError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return load_snapshot(
        site_config.input_dir,
        musings_glob=site_config.musings_glob,
        pattern=site_config.content_pattern,
    )


ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Site YAML config", exists=True, dir_okay=False),
]
InputOption = Annotated[
    Optional[Path],
    typer.Option("--input", "-i", help="Content input directory"),
]


@app.command("list")
def list_command(config: ConfigOption = None, input_dir: InputOption = None):
    """
    List every series with its members in part order.

    Examples:\n
        $ series_report.py list
    """
    snapshot = _load(config, input_dir)
    indexer = snapshot.indexer

    if not indexer.series_ids():
        typer.echo("No series found")
        return

    for series_id in indexer.series_ids():
        overview = indexer.overview(series_id)
        label = f"{series_id} ({overview.title})" if overview else f"{series_id} (no overview page)"
        typer.secho(label, bold=True)
        for item in indexer.members(series_id):
            part = "-" if item.part is None else item.part
            typer.echo(f"  {part:>3}  {item.title or item.url}  [{item.source_path}]")


@app.command("nav")
def nav_command(
    source_path: Annotated[
        str,
        typer.Argument(help="Page path relative to the input directory (e.g., musings/hello.md)"),
    ],
    config: ConfigOption = None,
    input_dir: InputOption = None,
):
    """
    Show series navigation for one page.

    Examples:\n
        $ series_report.py nav series/galactic-archives/setup.md
    """
    snapshot = _load(config, input_dir)

    item = snapshot.find(source_path)
    if item is None:
        typer.secho(f"Unknown page: {source_path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    nav = series_navigation(item, snapshot)
    if nav is None:
        typer.echo(f"{source_path} is not part of a series")
        return

    typer.secho(f"Series: {nav.series_id}", bold=True)
    typer.echo(f"  Overview: {nav.overview.url if nav.overview else '-'}")
    if nav.position:
        typer.echo(f"  Position: {nav.position} of {nav.total}")
    typer.echo(f"  Previous: {nav.previous.url if nav.previous else '-'}")
    typer.echo(f"  Next:     {nav.next.url if nav.next else '-'}")


if __name__ == "__main__":
    app()
