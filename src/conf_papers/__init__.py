"""
Conference Paper Downloader

Scrapes conference listing pages with per-site recipes and downloads the
papers. Recipes exist for:
- USENIX (USENIX Security Symposium)
- NDSS (Network and Distributed System Security Symposium)
- Oakland (IEEE Symposium on Security and Privacy, via Google Scholar)
- CCS (ACM Conference on Computer and Communications Security)
"""

__version__ = "1.0.0"

from .config import Conference, Config, load_conferences
