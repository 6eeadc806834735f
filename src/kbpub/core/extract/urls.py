"""Derived identifiers and URLs for a document path"""

import re
from pathlib import Path


SLUG_RE = re.compile(r'/([^/]+)\.[^.]+$')
PAGE_URL_RE = re.compile(r'^content/en/(.*)\.md$')
PAGE_URL_TEMPLATE = r'https://glossary.cncf.io/\1'
SOURCE_URL_RE = re.compile(r'^content/(.*)\.md$')
SOURCE_URL_TEMPLATE = r'https://github.com/cncf/glossary/blob/main/content/\1.md'


def slug_from_path(path: Path) -> str:
    """Return the filename stem of an absolute path, or '' if it has no extension."""
    m = SLUG_RE.search(path.absolute().as_posix())
    return m.group(1) if m else ''


def page_url(relative_path: str) -> str:
    """Published page URL; paths outside content/en/ pass through unchanged."""
    return PAGE_URL_RE.sub(PAGE_URL_TEMPLATE, relative_path)


def source_url(relative_path: str) -> str:
    """Canonical source URL; paths outside content/ pass through unchanged."""
    return SOURCE_URL_RE.sub(SOURCE_URL_TEMPLATE, relative_path)
