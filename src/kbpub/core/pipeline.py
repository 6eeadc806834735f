"""Pipeline step functions: extract and publish orchestration"""

import logging
from collections.abc import Iterator
from pathlib import Path

from kbpub.config import Settings
from kbpub.core.export import write_snapshot
from kbpub.core.extract.extract import extract_record
from kbpub.core.models import Record
from kbpub.core.parse import discover_files, parse_file
from kbpub.publish.client import CatalogClient


logger = logging.getLogger(__name__)


class ExtractError(RuntimeError):
    """A document could not be read or parsed; the run stops."""


def run_extract(settings: Settings) -> list[Record]:
    """Extract every matching document in glob order and write the snapshot.

    Any read or frontmatter failure raises ExtractError; no partial
    snapshot is written in that case.
    """
    records = []
    for p in discover_files(settings.search_path):
        logger.info("Processing %s ...", p)
        try:
            parsed = parse_file(
                p,
                content_root=Path(settings.content_root),
                repo_root=Path(settings.repo_root),
                site_url=settings.site_url,
            )
        except (OSError, ValueError) as e:
            raise ExtractError(f"Failed to extract {p}: {e}") from e
        records.append(extract_record(parsed))

    write_snapshot(records, Path(settings.output_file))
    logger.debug("Wrote %d record(s) to %s", len(records), settings.output_file)
    return records


def run_publish(records: list[Record], client: CatalogClient) -> Iterator[tuple[str, int]]:
    """POST each record in order, yielding (slug, status) as each request completes."""
    for record in records:
        status = client.publish(record)
        yield record.get('slug', ''), status
