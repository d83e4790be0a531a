"""Errors raised while rewriting files."""

from pathlib import Path
from typing import Union


class RewriteError(Exception):
    """Base class for rewriter failures that are not plain OS errors."""


class EncodingError(RewriteError):
    """A file's bytes are not valid UTF-8 text."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"not valid UTF-8 text ({reason})")
