"""Scanner module for collapsing space runs outside markup tags."""

from .collapse import collapse_spaces, collapse_text
from .tags import EVIL_SIGILS, find_tag_end, classify_tag

__all__ = [
    "collapse_spaces",
    "collapse_text",
    "EVIL_SIGILS",
    "find_tag_end",
    "classify_tag",
]
