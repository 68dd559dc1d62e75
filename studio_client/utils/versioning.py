"""
Versioning utilities for comparing dotted version strings.
"""
import logging
import re
from typing import List

logger = logging.getLogger(__name__)

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class VersionParseError(ValueError):
    """Raised when a compared version component is not an integer."""

    def __init__(self, version: str, component: str):
        self.version = version
        self.component = component
        super().__init__(f"Invalid version component '{component}' in version '{version}'")


def _split_components(version: str) -> List[str]:
    parts = version.split(".")
    # Trailing empty components are dropped ("1.2." -> ["1", "2"]),
    # but a string without any "." stays a single component
    if len(parts) > 1:
        while parts and parts[-1] == "":
            parts.pop()
    return parts


def _parse_component(version: str, component: str) -> int:
    if not _INTEGER_LITERAL.fullmatch(component):
        logger.debug(f"Could not parse component '{component}' of version '{version}'")
        raise VersionParseError(version, component)
    return int(component)


def compare_versions(version1: str, version2: str) -> int:
    """
    Compares two dotted version strings (e.g. "1.4.12" vs "1.5").

    Returns:
        < 0 if version1 is earlier than version2
        0 if they are the same
        > 0 if version1 is later than version2

    The result is the difference of the first differing component, not
    normalized to -1/0/1. Only the components both versions have are
    compared, so "1.2" and "1.2.3" are the same.

    Raises:
        VersionParseError: If a compared component is not an integer.
    """
    v1_parts = _split_components(version1)
    v2_parts = _split_components(version2)

    num_parts = min(len(v1_parts), len(v2_parts))
    for i in range(num_parts):
        result = _parse_component(version1, v1_parts[i]) - _parse_component(version2, v2_parts[i])
        if result != 0:
            return result
    return 0
