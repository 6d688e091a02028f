"""Source classification for input URLs."""

from .constants import SourceConstants


def detect_source(url: str) -> str:
    """Return the source tag for a URL; the first matching domain fragment wins."""
    for fragment, tag in SourceConstants.DOMAIN_FRAGMENTS:
        if fragment in url:
            return tag
    return SourceConstants.OTHER


def is_discussion_url(url: str) -> bool:
    """True for Reddit threads, which are read through their JSON endpoint."""
    return detect_source(url) == SourceConstants.REDDIT
