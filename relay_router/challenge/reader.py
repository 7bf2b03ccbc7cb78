"""Challenge reader - Loads challenge text from a file, a URL or standard input."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import requests

from relay_router.constants import ChallengeConfig

logger = logging.getLogger(__name__)


def download_challenge(url: str) -> str:
    """Download challenge text, e.g. a random one from ChallengeConfig.GENERATOR_URL.

    Raises:
        requests.RequestException: If the download fails.
    """
    logger.info(f"Downloading challenge from {url}...")
    response = requests.get(url, timeout=ChallengeConfig.DOWNLOAD_TIMEOUT_S)
    response.raise_for_status()
    return response.text


def read_challenge(location: Optional[str] = None, stdin: Optional[TextIO] = None) -> str:
    """Read challenge text from location.

    Args:
        location: File path, http(s) URL, or None / "-" for standard input
        stdin: Stream used for standard input (sys.stdin by default)

    Returns:
        The text with surrounding whitespace removed.

    Raises:
        OSError: If the file cannot be read.
        requests.RequestException: If the download fails.
    """
    if not location or location == ChallengeConfig.STDIN_MARKER:
        logger.debug("Reading challenge from standard input")
        contents = (stdin or sys.stdin).read()
    elif location.startswith(ChallengeConfig.URL_SCHEMES):
        contents = download_challenge(location)
    else:
        logger.debug(f"Reading challenge from {location}")
        contents = Path(location).read_text(encoding="utf-8")

    return contents.strip()
