"""
Regex scanner for ``<a ... href="...">`` tags.

The scanner works on raw text and never builds a DOM, so broken markup,
unclosed anchors and odd whitespace are all fine. Only opening tags named
exactly ``a`` are considered, and inside them only a real attribute name
``href`` with a double-quoted value produces a result.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional

# "<a" followed by whitespace or ">" so that <abbr>, <article>, <link> never match
# ASCII-only \s: a non-breaking space does not separate the tag name
ANCHOR_TAG_RE = re.compile(r"<a(?=[\s>])([^>]*)>", re.IGNORECASE | re.ASCII)

# name[=value] pairs of an attribute region; value is "double", 'single' or bare
ATTRIBUTE_RE = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""",
    re.ASCII,
)


def _href_from_attributes(region: str) -> Optional[str]:
    for match in ATTRIBUTE_RE.finditer(region):
        if match.group(1).lower() != "href":
            continue

        # first href wins, like a browser; anything but double quotes is ignored
        return match.group(2)

    return None


def iter_hrefs(html: str) -> Iterator[str]:
    """Yield raw href values of anchor tags in document order."""
    if not html:
        return

    for tag in ANCHOR_TAG_RE.finditer(html):
        href = _href_from_attributes(tag.group(1))
        if href is not None:
            yield href


def find_hrefs(html: str) -> List[str]:
    return list(iter_hrefs(html))
