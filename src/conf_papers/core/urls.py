"""
URL resolution and filename helpers
"""

import re
from urllib.parse import unquote, urljoin, urlsplit

from ..errors import InvalidURLError
from .utils import sanitize_filename
from ..config import GATED_HOST

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')

# "%" not followed by two hex digits
BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def _split(url: str):
    # urlsplit silently drops tabs and newlines
    if CONTROL_CHARS.search(url):
        raise InvalidURLError(f"invalid control character in URL {url!r}")

    try:
        parts = urlsplit(url)
        # Bad ports only raise on attribute access
        _ = parts.port
        _ = parts.hostname
    except ValueError as e:
        raise InvalidURLError(f"invalid URL {url!r}: {e}") from e

    # Query escapes are not checked
    for component in (parts.netloc, parts.path, parts.fragment):
        if BAD_ESCAPE.search(component):
            raise InvalidURLError(f"invalid escape in URL {url!r}")

    return parts


def resolve_url(base_url: str, link: str) -> str:
    """
    Turn a link found on a page into an absolute URL

    Args:
        base_url: URL of the page the link was found on
        link: Value of the href attribute

    Returns:
        ``link`` unchanged when it already has a scheme and host, otherwise
        ``link`` resolved against ``base_url``
    """
    parts = _split(link)
    if parts.scheme and parts.netloc:
        return link

    _split(base_url)
    return urljoin(base_url, link)


def is_gated(url: str) -> bool:
    """Check whether a URL points at the host that hides its PDFs behind JS"""
    try:
        return urlsplit(url).hostname == GATED_HOST
    except ValueError:
        return False


def filename_from_url(url: str) -> str:
    """
    Derive the local filename from the last path segment of a URL

    Returns an empty string if the URL path ends with a slash.
    """
    segment = _split(url).path.rsplit('/', 1)[-1]
    return sanitize_filename(unquote(segment))
