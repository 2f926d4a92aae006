"""
Conference crawler: runs the recipe of each configured conference
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional
from urllib.parse import urlencode

import requests

from .downloader import PDFDownloader
from .extractor import get_download_url, get_links, get_paper_titles
from .matchers import Matcher
from .recipe import Recipe, Strategy
from .session import SessionManager
from .urls import filename_from_url, is_gated
from .utils import ensure_dir
from ..config import SCHOLAR_SEARCH_URL, Conference, Config
from .. import crawlers
from ..errors import CrawlerError, MissingDownloadLinkError, TooManyDownloadLinksError

logger = logging.getLogger(__name__)

RecipeLookup = Callable[[str, int], Optional[Recipe]]


@dataclass
class CrawlStats:
    downloaded: int = 0
    skipped: int = 0    # already on disk, or on the gated host
    failed: int = 0
    missing: int = 0    # no download link found

    def add(self, other: 'CrawlStats') -> None:
        self.downloaded += other.downloaded
        self.skipped += other.skipped
        self.failed += other.failed
        self.missing += other.missing

    def __str__(self) -> str:
        return (
            f"downloaded {self.downloaded}, "
            f"skipped {self.skipped}, "
            f"failed {self.failed}, "
            f"no link {self.missing}"
        )


def scholar_search_url(title: str) -> str:
    return f"{SCHOLAR_SEARCH_URL}?{urlencode({'q': title})}"


class ConferenceCrawler:
    """
    Sequential crawler over the configured conferences

    Each conference is dispatched by name and year to a Recipe. Missing and
    duplicate download links and failed downloads only skip the paper; any
    other error propagates and ends the run.
    """

    def __init__(
        self,
        config: Config,
        session_manager: Optional[SessionManager] = None,
        find_recipe: Optional[RecipeLookup] = None,
    ):
        """
        Initialize crawler

        Args:
            config: Run configuration
            session_manager: Session source, built from config if None
            find_recipe: Recipe lookup by (name, year), the built-in tables if None
        """
        self.config = config
        self.find_recipe = find_recipe or crawlers.find_recipe

        if session_manager is None:
            session_manager = SessionManager(user_agent=config.user_agent)
        self.session_manager = session_manager
        self.session = session_manager.get_session()
        self.downloader = PDFDownloader(self.session)

        self._stats = CrawlStats()

    def crawl(
        self,
        conferences: Optional[Iterable[Conference]] = None,
        keep_going: bool = False,
    ) -> CrawlStats:
        """
        Crawl conferences in order

        Args:
            conferences: Conferences to crawl, config.conferences if None
            keep_going: Log fatal errors and move on to the next conference

        Returns:
            Totals over all conferences
        """
        if conferences is None:
            conferences = self.config.conferences

        total = CrawlStats()
        for conf in conferences:
            try:
                total.add(self.crawl_conference(conf))
            except (CrawlerError, requests.RequestException, OSError) as e:
                if not keep_going:
                    raise
                logger.error(f"Failed to crawl {conf}: {e}")
                logger.debug("Traceback:", exc_info=True)

        logger.info(f"Crawl complete: {total}")
        return total

    def crawl_conference(self, conf: Conference) -> CrawlStats:
        """
        Crawl a single conference edition

        Args:
            conf: Conference entry

        Returns:
            Counters for this conference; all zero if no recipe matched
        """
        recipe = self.find_recipe(conf.name, conf.year)
        if recipe is None:
            logger.info(f"no parser found for {conf}")
            return CrawlStats()

        conf_dir = ensure_dir(self.conference_dir(conf))
        logger.info(f"{'=' * 60}")
        logger.info(f"Crawling {conf} ({recipe.strategy.value}) from {conf.url}")

        self._stats = CrawlStats()
        if recipe.strategy is Strategy.DIRECT:
            self._crawl_direct(conf, recipe, conf_dir)
        elif recipe.strategy is Strategy.PAPER_PAGES:
            self._crawl_paper_pages(conf, recipe, conf_dir)
        elif recipe.strategy is Strategy.SCHOLAR_SEARCH:
            self._crawl_scholar_search(conf, recipe, conf_dir)
        else:
            raise ValueError(f"Unknown strategy: {recipe.strategy}")

        logger.info(f"{conf} complete: {self._stats}")
        return self._stats

    def conference_dir(self, conf: Conference) -> Path:
        return Path(self.config.output_dir) / conf.name / str(conf.year)

    def _crawl_direct(self, conf: Conference, recipe: Recipe, conf_dir: Path) -> None:
        links = get_links(self.session, conf.url, recipe.listing)
        logger.info(f"Found {len(links)} download links")

        for i, link in enumerate(links, 1):
            logger.info(f"[{i}/{len(links)}] {link}")
            self._download(link, conf_dir)

    def _crawl_paper_pages(self, conf: Conference, recipe: Recipe, conf_dir: Path) -> None:
        pages = get_links(self.session, conf.url, recipe.listing)
        logger.info(f"Found {len(pages)} paper pages")

        for i, page in enumerate(pages, 1):
            download_url = self._resolve_download_url(page, recipe.paper)
            if download_url is None:
                continue
            logger.info(f"[{i}/{len(pages)}] {download_url}")
            self._download(download_url, conf_dir)

    def _crawl_scholar_search(self, conf: Conference, recipe: Recipe, conf_dir: Path) -> None:
        titles = get_paper_titles(self.session, conf.url, recipe.listing)
        logger.info(f"Found {len(titles)} paper titles")

        for i, title in enumerate(titles, 1):
            search_url = scholar_search_url(title)
            download_url = self._resolve_download_url(search_url, recipe.paper)
            if download_url is None:
                continue
            logger.info(f"[{i}/{len(titles)}] {title}: {download_url}")

            if is_gated(download_url):
                logger.info(f"Skipping {download_url}: host requires JS to download")
                self._stats.skipped += 1
                time.sleep(self.config.delay)
                continue

            self._download(download_url, conf_dir)

    def _resolve_download_url(self, page_url: str, matcher: Matcher) -> Optional[str]:
        """
        Find the download link on a paper page

        Returns:
            URL to download, or None if the page has no download link
        """
        try:
            return get_download_url(self.session, page_url, matcher)
        except MissingDownloadLinkError as e:
            logger.info(str(e))
            self._stats.missing += 1
            return None
        except TooManyDownloadLinksError as e:
            logger.warning(f"{e}, using {e.url}")
            return e.url

    def _download(self, url: str, conf_dir: Path) -> None:
        filename = filename_from_url(url)
        if not filename:
            logger.error(f"Cannot derive a filename from {url}, skipping")
            self._stats.failed += 1
            return

        try:
            if self.downloader.download(url, conf_dir / filename):
                self._stats.downloaded += 1
            else:
                self._stats.skipped += 1
        except (OSError, requests.RequestException) as e:
            logger.error(f"Failed to download {url}: {e}")
            self._stats.failed += 1

        time.sleep(self.config.delay)
