from urllib.parse import urljoin, urlsplit
import re

from loguru import logger


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# links with any other scheme (javascript:, data:, tel: ...) are dropped
SUPPORTED_SCHEMES = ("http", "https", "ftp", "file", "mailto")

# schemes that are meaningless without a host
NETLOC_SCHEMES = ("http", "https", "ftp")

# browsers drop these anywhere in a URL, so markup may wrap inside the quotes
_URL_NOISE_RE = re.compile(r"[\t\r\n]")


def is_absolute_url(href: str) -> bool:
    """Whether the reference starts with a scheme (``http:``, ``mailto:`` ...)."""
    return bool(_SCHEME_RE.match(href.strip()))


def strip_fragment(url: str) -> str:
    """Drop the ``#fragment`` part, keeping path and query untouched."""
    return url.split("#", 1)[0]


def _is_well_formed(url: str) -> bool:
    try:
        parsed = urlsplit(url)
        if parsed.scheme.lower() not in SUPPORTED_SCHEMES:
            return False

        if parsed.scheme.lower() in NETLOC_SCHEMES and not parsed.hostname:
            return False

        # raises ValueError for non-numeric or out-of-range ports
        parsed.port
    except ValueError:
        return False

    return True


def validate_base_url(base_url: str) -> str:
    """Return ``base_url`` if it can serve as a base for resolution.

    Raises:
        ValueError: the base is relative or otherwise malformed.
    """
    if not isinstance(base_url, str) or not is_absolute_url(base_url):
        raise ValueError(f"Base URL must be absolute: {base_url!r}")

    if not _is_well_formed(base_url):
        raise ValueError(f"Malformed base URL: {base_url!r}")

    return base_url


def resolve_url(base_url: str, href: str) -> str | None:
    """Resolve ``href`` against ``base_url`` and drop its fragment.

    Absolute references come back exactly as written (no case folding),
    relative ones are merged with ``urljoin``. Returns None when the
    result is not a usable URL.
    """
    raw_link = _URL_NOISE_RE.sub("", href).strip()

    if is_absolute_url(raw_link):
        url = strip_fragment(raw_link)
    else:
        try:
            url = strip_fragment(urljoin(base_url, raw_link))
        except ValueError as exc:
            logger.debug(f"Cannot resolve {href!r} against {base_url}: {exc}")
            return None

    if not _is_well_formed(url):
        logger.debug(f"Skipping malformed link {href!r} (resolved to {url!r})")
        return None

    return url
