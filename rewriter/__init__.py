"""Rewriter module for applying the scanner to files on disk."""

from .errors import RewriteError, EncodingError
from .file import rewrite_file
from .dispatcher import process_paths

__all__ = [
    "RewriteError",
    "EncodingError",
    "rewrite_file",
    "process_paths",
]
