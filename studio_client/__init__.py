from studio_client.utils.url_helpers import host_page_base_url_without_context, strip_session_scope
from studio_client.utils.versioning import VersionParseError, compare_versions

__all__ = [
    "strip_session_scope",
    "host_page_base_url_without_context",
    "compare_versions",
    "VersionParseError",
]
