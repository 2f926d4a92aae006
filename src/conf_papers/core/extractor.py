"""
Link, title and download URL extraction
"""

import logging
from typing import List

import requests

from .fetcher import fetch_page
from .matchers import (
    ALL_VERSIONS_PATTERN,
    Matcher,
    anchor_text_matching,
    attr,
    scholar_pdf_anchor,
    text,
)
from .urls import is_gated, resolve_url
from ..errors import (
    MissingDownloadLinkError,
    TooManyDownloadLinksError,
    VersionLinkNotFoundError,
)

logger = logging.getLogger(__name__)


def get_links(session: requests.Session, page_url: str, matcher: Matcher) -> List[str]:
    """
    Collect the absolute URLs of all matching anchors on a page

    Args:
        session: requests Session
        page_url: Page URL
        matcher: Anchor matcher

    Returns:
        Resolved hrefs in document order, duplicates kept
    """
    soup = fetch_page(session, page_url)

    # An unresolvable href raises InvalidURLError and ends the run
    links = [resolve_url(page_url, attr(node, 'href')) for node in soup.find_all(matcher)]
    logger.debug(f"Found {len(links)} links on {page_url}")
    return links


def get_paper_titles(session: requests.Session, page_url: str, matcher: Matcher) -> List[str]:
    """
    Collect the text of all matching nodes on a page

    Args:
        session: requests Session
        page_url: Page URL
        matcher: Title node matcher

    Returns:
        Titles in document order
    """
    soup = fetch_page(session, page_url)
    titles = [text(node) for node in soup.find_all(matcher)]
    logger.debug(f"Found {len(titles)} titles on {page_url}")
    return titles


def get_download_url(session: requests.Session, page_url: str, matcher: Matcher) -> str:
    """
    Find the single download link on a page

    Links to the JS-gated host are replaced by a PDF link found through the
    "All N versions" page that Google Scholar lists next to the result.

    Args:
        session: requests Session
        page_url: Page URL
        matcher: Anchor matcher expected to hit exactly once

    Returns:
        Absolute download URL

    Raises:
        MissingDownloadLinkError: Nothing matched
        TooManyDownloadLinksError: More than one match; ``url`` holds the first
        VersionLinkNotFoundError: Gated link without a versions link
    """
    soup = fetch_page(session, page_url)

    nodes = soup.find_all(matcher)
    if not nodes:
        raise MissingDownloadLinkError(page_url)

    file_url = resolve_url(page_url, attr(nodes[0], 'href'))

    if len(nodes) > 1:
        raise TooManyDownloadLinksError(page_url, file_url, len(nodes))

    if is_gated(file_url):
        version_link = soup.find(anchor_text_matching(ALL_VERSIONS_PATTERN))
        if version_link is None:
            raise VersionLinkNotFoundError(file_url)

        versions_url = resolve_url(page_url, attr(version_link, 'href'))
        logger.info(f"{file_url} is gated, trying {versions_url}")

        # Excluding the gated host keeps this from recursing again
        return get_download_url(session, versions_url, scholar_pdf_anchor(exclude_gated=True))

    return file_url
