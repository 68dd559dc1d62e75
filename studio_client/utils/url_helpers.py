"""
URL helpers for the hosting page of the IDE client.

The server scopes each user session under a path segment of the form
``/s/<21 hex digits>/``. Links that must survive across sessions (bookmarks,
sign-out redirects, shared URLs) need that segment removed first.
"""
import logging
import re
from typing import Optional

from studio_client.core.config import settings

logger = logging.getLogger(__name__)

# 5 + 8 + 8 hex digits, delimited by "/s/" and "/"
SESSION_SCOPE_PATTERN = re.compile(r"/s/[A-Fa-f0-9]{5}[A-Fa-f0-9]{8}[A-Fa-f0-9]{8}/")


def strip_session_scope(url: str, include_slash: bool) -> str:
    """
    Remove every session-scoping segment from a URL.

    Args:
        url: The URL to clean.
        include_slash: If True each segment is replaced by a single "/",
            otherwise it is removed entirely.

    Returns:
        The URL with all non-overlapping segments replaced. A URL without a
        session segment is returned unchanged.

    Examples:
        >>> strip_session_scope("http://host/s/abcde1234567890abcdef/", True)
        'http://host/'

        >>> strip_session_scope("http://host/s/abcde1234567890abcdef/", False)
        'http://host'
    """
    replace_with = "/" if include_slash else ""
    stripped, count = SESSION_SCOPE_PATTERN.subn(replace_with, url)
    if count:
        logger.debug(f"Stripped {count} session segment(s) from {url}")
    return stripped


def host_page_base_url_without_context(include_slash: bool = False, base_url: Optional[str] = None) -> str:
    """
    Return the host page base URL with its session segment removed.

    Args:
        include_slash: Passed through to strip_session_scope.
        base_url: Explicit host page base URL. If None, HOST_PAGE_BASE_URL
            from the application settings is used.

    Raises:
        ValueError: If no base URL is given and none is configured.
    """
    # Explicit argument takes precedence over settings
    url = base_url if base_url is not None else settings.HOST_PAGE_BASE_URL
    if url is None:
        raise ValueError("HOST_PAGE_BASE_URL is not set in configuration")

    return strip_session_scope(url, include_slash)
