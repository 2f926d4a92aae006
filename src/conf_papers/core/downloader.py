"""
File downloader
"""

import logging
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class PDFDownloader:
    """Downloads a file unless it is already on disk"""

    CHUNK_SIZE = 8192

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize downloader

        Args:
            session: requests Session to use, a fresh one if None
        """
        self.session = session if session is not None else requests.Session()

    def download(self, url: str, save_path: Path) -> bool:
        """
        Download a URL to a file

        Only the existence of ``save_path`` is checked; its content is not.
        Errors (OSError, requests.RequestException) propagate after the
        partial file has been removed.

        Args:
            url: URL to download from
            save_path: Destination path

        Returns:
            True if downloaded, False if the file already existed
        """
        save_path = Path(save_path)
        if save_path.exists():
            logger.info(f"Skipped (exists): {save_path}")
            return False

        temp_path = save_path.with_name(save_path.name + '.part')

        try:
            with open(temp_path, 'wb') as f:
                with self.session.get(url, stream=True) as response:
                    response.raise_for_status()
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            temp_path.replace(save_path)
        except BaseException:
            if temp_path.exists():
                temp_path.unlink()
            raise

        return True
