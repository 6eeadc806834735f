"""Title and second-level section scans over a markdown body"""

import re


TITLE_RE = re.compile(r'^#[ \t](.*)$', re.MULTILINE)
# Lazy body capture stops at the next "## " line, never swallowing it.
SECTION_RE = re.compile(r'^##[ \t]([^\n]*)\n?(.*?)(?=^##[ \t]|\Z)', re.MULTILINE | re.DOTALL)
WHITESPACE_RE = re.compile(r'\s+')


def section_key(heading: str) -> str:
    """Normalize heading text to a record key: 'What It Is' -> 'what_it_is'."""
    return WHITESPACE_RE.sub('_', heading.strip().lower())


def extract_title(body: str) -> str:
    """Return the text of the first '# ' heading, or '' when there is none."""
    m = TITLE_RE.search(body)
    return m.group(1) if m else ''


def extract_sections(body: str) -> dict[str, str]:
    """Map each '## ' heading to its trimmed body, in document order.

    Repeated headings keep the last body, matching assignment order.
    """
    return {section_key(m.group(1)): m.group(2).strip() for m in SECTION_RE.finditer(body)}
