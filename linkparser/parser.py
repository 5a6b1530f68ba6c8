from typing import Iterator, List

from loguru import logger

from linkparser.parsing.anchor_scanner import iter_hrefs
from linkparser.utils.url_utils import resolve_url, validate_base_url


class LinkParser:
    """Pull absolute links out of raw HTML, in document order.

    Duplicates are kept and nothing is filtered besides hrefs that cannot
    be turned into a valid URL.
    """

    def iter_links(self, base_url: str, html: str) -> Iterator[str]:
        validate_base_url(base_url)
        return self._resolve_all(base_url, html)

    def _resolve_all(self, base_url: str, html: str) -> Iterator[str]:
        for href in iter_hrefs(html):
            resolved = resolve_url(base_url, href)
            if resolved is not None:
                yield resolved

    def extract_links(self, base_url: str, html: str) -> List[str]:
        links = list(self.iter_links(base_url, html))
        logger.debug(f"Extracted {len(links)} links from {base_url}")
        return links


_default_parser = LinkParser()


def iter_links(base_url: str, html: str) -> Iterator[str]:
    return _default_parser.iter_links(base_url, html)


def extract_links(base_url: str, html: str) -> List[str]:
    """Return every anchor target of ``html`` resolved against ``base_url``.

    Raises:
        ValueError: ``base_url`` is not an absolute URL.
    """
    return _default_parser.extract_links(base_url, html)
