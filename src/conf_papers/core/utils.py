"""
Utility functions for file handling
"""

import re
from pathlib import Path


def sanitize_filename(filename: str, max_length: int = 200) -> str:
    """
    Sanitize filename by removing illegal characters

    Args:
        filename: Original filename
        max_length: Maximum length of filename

    Returns:
        Sanitized filename
    """
    # Remove illegal characters
    filename = re.sub(r'[<>:"/\\|?*]', '', filename)

    # Replace control characters
    filename = filename.replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')

    filename = filename.strip()

    # Keep the extension when truncating
    if len(filename) > max_length:
        stem, dot, ext = filename.rpartition('.')
        if dot and len(ext) < 10:
            filename = stem[:max_length - len(ext) - 1] + '.' + ext
        else:
            filename = filename[:max_length]

    return filename


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, create if not

    Args:
        path: Directory path

    Returns:
        The path
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
