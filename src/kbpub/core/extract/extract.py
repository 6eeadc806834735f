"""Convert a ParsedDoc into a flat Record"""

from typing import Any

from kbpub.core.extract.sections import extract_sections, extract_title
from kbpub.core.extract.urls import page_url, slug_from_path, source_url
from kbpub.core.models import ParsedDoc, Record
from kbpub.core.parse import remove_leading_blank_lines


def filter_tags(frontmatter: dict[str, Any]) -> dict[str, Any]:
    """Drop blank entries from a list-valued 'tags'; other shapes are left alone."""
    tags = frontmatter.get('tags')
    if not isinstance(tags, list):
        return frontmatter
    kept = [t for t in tags if not (isinstance(t, str) and t.strip() == '')]
    return {**frontmatter, 'tags': kept}


def _lower_keys(fields: dict[str, Any]) -> dict[str, Any]:
    return {str(k).lower(): v for k, v in fields.items()}


def extract_record(parsed: ParsedDoc) -> Record:
    """Build the record for one document.

    Layers are merged in this order, each overwriting the ones before it:
    computed title, frontmatter, markdown body, '## ' sections, then the
    derived slug/url/srcUrl. url and srcUrl lead the key order.
    """
    url = page_url(parsed.relative_path)
    src_url = source_url(parsed.relative_path)
    record: Record = {'url': url, 'srcUrl': src_url}

    record['title'] = extract_title(parsed.markdown)
    record.update(_lower_keys(filter_tags(parsed.frontmatter)))
    record['markdown'] = remove_leading_blank_lines(parsed.markdown)
    record.update(extract_sections(parsed.markdown))

    record['slug'] = slug_from_path(parsed.path)
    record['url'] = url
    record['srcUrl'] = src_url
    return record
