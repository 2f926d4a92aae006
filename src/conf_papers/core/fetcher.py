"""
Page fetching and parsing
"""

import logging

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def fetch_page(session: requests.Session, url: str) -> BeautifulSoup:
    """
    GET a page and parse it

    The status code is not checked: an error page is parsed like any other.
    The raw body is handed to BeautifulSoup so a <meta charset> is honoured;
    the header encoding is only forced when the header names a charset.

    Args:
        session: requests Session
        url: Page URL

    Returns:
        Parsed document
    """
    logger.debug(f"Fetching {url}")
    response = session.get(url)
    if not response.ok:
        logger.debug(f"{url} returned {response.status_code}")

    from_encoding = None
    if 'charset' in response.headers.get('Content-Type', '').lower():
        from_encoding = response.encoding

    return BeautifulSoup(response.content, 'html.parser', from_encoding=from_encoding)
