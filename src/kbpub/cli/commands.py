"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from kbpub.config import PublishConfig, Settings, load_config
from kbpub.core.export import read_snapshot
from kbpub.core.models import Record
from kbpub.core.pipeline import ExtractError, run_extract, run_publish
from kbpub.publish.client import CatalogClient, PublishError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    return settings


def _publish_config(settings: Settings) -> PublishConfig:
    try:
        return settings.publish_config()
    except ValueError as e:
        _fail(str(e))


def _extract(settings: Settings) -> list[Record]:
    try:
        records = run_extract(settings)
    except ExtractError as e:
        _fail(str(e))
    typer.echo(f"Extracted {len(records)} record(s) to {settings.output_file}")
    return records


def _publish(records: list[Record], config: PublishConfig) -> None:
    try:
        with CatalogClient(config) as client:
            for slug, status in run_publish(records, client):
                typer.echo(f"POSTed {slug}, status: {status}")
    except PublishError as e:
        _fail(str(e))


def run_cmd(
    search: Annotated[Optional[str], typer.Option("--search-path", help="Glob of markdown files")] = None,
    output: Annotated[Optional[str], typer.Option("--output", help="Snapshot JSON file")] = None,
    ):
    """Run the full pipeline: extract -> snapshot -> publish."""
    settings = _settings(overrides={"search_path": search, "output_file": output})
    config = _publish_config(settings)

    records = _extract(settings)
    _publish(records, config)
    typer.echo("Done.")


def extract_cmd(
    search: Annotated[Optional[str], typer.Option("--search-path", help="Glob of markdown files")] = None,
    output: Annotated[Optional[str], typer.Option("--output", help="Snapshot JSON file")] = None,
    ):
    """Extract records and write the JSON snapshot without publishing."""
    settings = _settings(overrides={"search_path": search, "output_file": output})
    _extract(settings)


def publish_cmd(
    snapshot: Annotated[Optional[str], typer.Option("--snapshot", help="Snapshot JSON file to publish")] = None,
    ):
    """Publish records from a previously written snapshot."""
    settings = _settings(overrides={"output_file": snapshot})
    config = _publish_config(settings)

    path = Path(settings.output_file)
    try:
        records = read_snapshot(path)
    except (OSError, ValueError) as e:
        _fail(f"Cannot read snapshot {path}", e)
    _publish(records, config)
    typer.echo("Done.")
