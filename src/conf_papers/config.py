"""
Run configuration and the conference list loader
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_DELAY = 2.0
DEFAULT_CONFERENCES_FILE = "conferences.json"
DEFAULT_OUTPUT_DIR = "papers"

# Google Scholar search, used for conferences without PDF links on their site
SCHOLAR_SEARCH_URL = "https://scholar.google.com/scholar"

# Host that only serves PDFs to JS-capable browsers
GATED_HOST = "www.ieee-security.org"


@dataclass(frozen=True)
class Conference:
    name: str   # Conference name, also the output directory name
    url: str    # Listing page
    year: int

    def __str__(self) -> str:
        return f"{self.name} {self.year}"


@dataclass(frozen=True)
class Config:
    """Settings for one run, built once at startup"""
    delay: float = DEFAULT_DELAY
    conferences_file: Path = Path(DEFAULT_CONFERENCES_FILE)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    conferences: Tuple[Conference, ...] = ()
    user_agent: Optional[str] = None


def parse_conferences(data) -> List[Conference]:
    """
    Build Conference entries from decoded JSON

    Args:
        data: Decoded JSON, expected to be a list of objects

    Returns:
        List of Conference objects in file order
    """
    if not isinstance(data, list):
        raise ConfigError(f"expected a list of conferences, got {type(data).__name__}")

    conferences = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigError(f"entry {i}: expected an object")

        name = entry.get('name')
        url = entry.get('url')
        year = entry.get('year')

        if not isinstance(name, str) or not name:
            raise ConfigError(f"entry {i}: 'name' must be a non-empty string")
        if not isinstance(url, str) or not url:
            raise ConfigError(f"entry {i}: 'url' must be a non-empty string")
        # bool is an int subclass
        if not isinstance(year, int) or isinstance(year, bool):
            raise ConfigError(f"entry {i}: 'year' must be an integer")

        conferences.append(Conference(name=name, url=url, year=year))

    return conferences


def load_conferences(path: Path) -> List[Conference]:
    """
    Load the conference list from a JSON file

    Args:
        path: Path to the JSON file

    Returns:
        List of Conference objects
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    conferences = parse_conferences(data)
    logger.debug(f"Loaded {len(conferences)} conferences from {path}")
    return conferences
