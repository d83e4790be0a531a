"""In-place rewriting of a single file."""

import os
from pathlib import Path
from typing import Union

from scanner.collapse import collapse_spaces
from .errors import EncodingError


def rewrite_file(path: Union[str, Path], write: bool = True) -> bool:
    """
    Collapse space runs in a file, rewriting it in place if anything changed.

    The file is opened once, read-write unless write is False. When the
    content changes it is truncated, rewound and rewritten through the same
    descriptor, so the inode is kept. Unchanged files are never written.

    Args:
        path: File to process. Directories and missing paths raise OSError.
        write: If False, only report whether the file would change.

    Returns:
        True if the content changed (or would change, when write is False).

    Raises:
        OSError: The file could not be opened, read or written.
        EncodingError: The file is not valid UTF-8.
    """
    with open(path, "r+b" if write else "rb") as handle:
        data = handle.read()
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(path, str(e)) from e

        buffer = bytearray(data)
        if not collapse_spaces(buffer):
            return False

        if write:
            handle.truncate(len(buffer))
            handle.seek(0)
            handle.write(buffer)
            handle.flush()
            os.fsync(handle.fileno())

    return True
