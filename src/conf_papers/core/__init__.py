"""
Core modules for paper crawling
"""

from .utils import sanitize_filename, ensure_dir
from .urls import resolve_url, is_gated, filename_from_url
from .session import SessionManager
from .fetcher import fetch_page
from .extractor import get_links, get_paper_titles, get_download_url
from .downloader import PDFDownloader
from .recipe import Recipe, Strategy
from .crawler import ConferenceCrawler, CrawlStats
