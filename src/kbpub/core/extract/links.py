"""Rewrite relative markdown link targets to absolute URLs"""

import os
import re
from pathlib import Path
from urllib.parse import urljoin


# ](target) or ](target "title"); targets never contain spaces or ')'.
LINK_RE = re.compile(r'\]\(([^ )]+)(?: "([^"]*)")?\)')
PARENT_PREFIX_RE = re.compile(r'^(?:\.\./)+')


def link_base_url(path: Path, content_root: Path, site_url: str) -> str:
    """Return the URL a document's relative links resolve against.

    The file path is taken relative to content_root and any leading ../
    segments are dropped, so files outside the root still get a site URL.
    """
    relative = Path(os.path.relpath(path, content_root)).as_posix()
    return site_url + PARENT_PREFIX_RE.sub('', relative)


def rewrite_links(text: str, base_url: str) -> str:
    """Resolve every link target in text against base_url, keeping titles verbatim."""
    def _resolve(m: re.Match) -> str:
        target = urljoin(base_url, m.group(1))
        title = m.group(2)
        if title:
            return f']({target} "{title}")'
        return f']({target})'

    return LINK_RE.sub(_resolve, text)
