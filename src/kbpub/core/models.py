"""Intermediate data models for the extract and publish pipeline"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel


# Front matter values arrive straight from YAML, so records stay open-ended.
RecordValue = Union[str, int, float, bool, date, list[Any], dict[str, Any], None]
Record = dict[str, RecordValue]


@dataclass
class ParsedDoc:
    """Internal parse result for one markdown file; not persisted."""
    path:          Path
    relative_path: str             # POSIX path relative to repo_root
    markdown:      str             # body only (frontmatter stripped)
    frontmatter:   dict[str, Any]


class PublishPayload(BaseModel):
    """Envelope POSTed to the catalog for a single record."""
    uid: str
    title: Any = ""
    summary: Any = ""
    catalog: str
    properties: dict[str, Any]
