"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_domain(url: str) -> str:
    """Extract the host name from a URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The host name (without a leading 'www.'), or "" if none can be derived.
    """
    try:
        host = urlparse(url.strip()).hostname or ""
    except ValueError:
        logger.debug(f"Could not get domain from url {url}")
        return ""
    if host.startswith("www."):
        host = host[4:]
    return host
