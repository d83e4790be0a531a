"""Single-pass space collapsing that leaves markup bodies untouched."""

import re
from typing import List, Tuple

from .tags import (
    LT,
    OPENING,
    classify_tag,
    closes_tag,
    find_tag_end,
    opens_tag,
)


# Next byte the scanner has to look at while outside any tag
_PLAIN_STOP = re.compile(rb"<| {2,}")


def collapse_spaces(buffer: bytearray) -> bool:
    """
    Collapse runs of two or more spaces in buffer, in place.

    Runs are only collapsed while no markup tag is open. Spacing between an
    opening tag and its closing tag is kept verbatim. A '<' directly followed
    by one of ``! = < >`` never starts a tag, and a tag that reaches a newline
    before its '>' is treated as literal text.

    The buffer is only read while scanning; the kept slices are joined and
    assigned back once at the end.

    Args:
        buffer: Text buffer to rewrite. Shrinks by (run length - 1) bytes for
                every collapsed run.

    Returns:
        True if at least one run was collapsed.
    """
    kept: List[bytearray] = []
    copied = 0  # buffer[:copied] is already in kept
    level = 0
    pos = 0

    while True:
        if level == 0:
            match = _PLAIN_STOP.search(buffer, pos)
            if match is None:
                break
            pos = match.start()
        else:
            # Inside a tag body only '<' matters
            pos = buffer.find(b"<", pos)
            if pos == -1:
                break

        if buffer[pos] != LT:
            # Keep the first space of the run
            kept.append(buffer[copied:pos + 1])
            copied = pos = match.end()
            continue

        if level > 0 and closes_tag(buffer, pos):
            end = find_tag_end(buffer, pos + 2)
            if end is None:
                break
            if end == -1:
                pos += 1
                continue
            level -= 1
            pos = end + 1
            continue

        if not opens_tag(buffer, pos):
            pos += 1
            continue

        end = find_tag_end(buffer, pos + 1)
        if end is None:
            break
        if end == -1:
            # Unterminated on this line: resume right after the '<'
            pos += 1
            continue

        # A stray '</x>' at level 0 is classified CLOSING and clamps the
        # level at 0, so collapsing carries on after it
        # (closing-tag scanning itself only runs while level > 0)
        if classify_tag(buffer, pos, end) == OPENING:
            level += 1
        pos = end + 1

    if not kept:
        return False
    kept.append(buffer[copied:])
    buffer[:] = b"".join(kept)
    return True


def collapse_text(text: str) -> Tuple[str, bool]:
    """Collapse spaces in a string. Returns (new_text, modified)."""
    buffer = bytearray(text.encode("utf-8"))
    modified = collapse_spaces(buffer)
    if not modified:
        return text, False
    return buffer.decode("utf-8"), True
