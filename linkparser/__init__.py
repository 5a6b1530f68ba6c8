from .parser import LinkParser, extract_links, iter_links

__all__ = [
    "LinkParser",
    "extract_links",
    "iter_links",
]
