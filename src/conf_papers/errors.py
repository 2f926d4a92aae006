"""
Exceptions raised while crawling
"""


class CrawlerError(Exception):
    """Base class for all crawler errors"""


class ConfigError(CrawlerError):
    """The conference list could not be loaded"""


class InvalidURLError(CrawlerError, ValueError):
    """A page or link URL could not be parsed"""


class FetchError(CrawlerError):
    """A page did not contain what the recipe expected"""


class MissingDownloadLinkError(FetchError):
    """No download link on the page; the paper is skipped"""

    def __init__(self, page_url: str):
        super().__init__(f"no pdf download links found on page: {page_url}")
        self.page_url = page_url


class TooManyDownloadLinksError(FetchError):
    """
    More than one download link on the page

    The first link is kept in ``url`` so callers can still download it.
    """

    def __init__(self, page_url: str, url: str, count: int):
        super().__init__(f"too many pdf download links found on page: {page_url} ({count})")
        self.page_url = page_url
        self.url = url
        self.count = count


class VersionLinkNotFoundError(FetchError):
    """No "All N versions" link next to a gated download link"""

    def __init__(self, url: str):
        super().__init__(f"no version link found for: {url}")
        self.url = url
