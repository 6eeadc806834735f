"""JSON snapshot of extracted records"""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from kbpub.core.models import Record


_RECORDS = TypeAdapter(list[dict[str, Any]])


def dump_records(records: list[Record]) -> bytes:
    """Serialize records as a 2-space indented JSON array; YAML dates become ISO strings."""
    return _RECORDS.dump_json(records, indent=2)


def write_snapshot(records: list[Record], output_file: Path) -> Path:
    """Overwrite output_file with the full record list. Returns the path written."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_bytes(dump_records(records))
    return output_file


def read_snapshot(snapshot: Path) -> list[Record]:
    """Load records previously written by write_snapshot."""
    data = json.loads(snapshot.read_text(encoding='utf-8'))
    if not isinstance(data, list):
        raise ValueError(f"Invalid snapshot {snapshot}: expected a JSON array")
    return data
