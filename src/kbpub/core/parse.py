"""File discovery, frontmatter extraction, and link-rewritten document loading"""

import glob
import os
import re
from pathlib import Path
from typing import Any

import yaml

from kbpub.core.extract.links import link_base_url, rewrite_links
from kbpub.core.models import ParsedDoc


FRONTMATTER_RE = re.compile(
    r'\A\ufeff?---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)',
    re.DOTALL | re.MULTILINE,
)
LEADING_BLANK_RE = re.compile(r'\A\s*[\r\n]')


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def remove_leading_blank_lines(text: str) -> str:
    """Drop whitespace-only lines at the start of text."""
    return LEADING_BLANK_RE.sub('', text, count=1)


def discover_files(search_path: str) -> list[Path]:
    """Return files matching the glob in enumeration order, skipping _-prefixed names."""
    return [
        Path(p) for p in glob.glob(search_path, recursive=True)
        if not os.path.basename(p).startswith('_') and os.path.isfile(p)
    ]


def parse_file(
    path: Path,
    content_root: Path = Path('content'),
    repo_root: Path = Path('.'),
    site_url: str = 'https://glossary.cncf.io/',
    ) -> ParsedDoc:
    """Read a markdown file, rewrite its links, and split off the frontmatter."""
    raw = path.read_text(encoding='utf-8')
    raw = rewrite_links(raw, link_base_url(path, content_root, site_url))
    frontmatter, body = _strip_frontmatter(raw)
    return ParsedDoc(
        path=path,
        relative_path=Path(os.path.relpath(path, repo_root)).as_posix(),
        markdown=body,
        frontmatter=frontmatter,
    )
