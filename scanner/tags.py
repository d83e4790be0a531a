"""Angle-bracket tag recognition for the space collapser."""

import re
from typing import Optional


LT = ord("<")
SLASH = ord("/")
NEWLINE = ord("\n")

# Bytes that stop a '<' from opening a tag.
# Covers wiki comments and comparisons, e.g. <!-- comment -->, <=, <<, <>
EVIL_SIGILS = frozenset(b"!=<>")

# Either byte ends a tag scan
_TAG_STOP = re.compile(rb"[>\n]")

# Tag kinds returned by classify_tag
OPENING = "opening"
CLOSING = "closing"
SELF_CLOSING = "self-closing"


def opens_tag(buffer: bytearray, pos: int) -> bool:
    """
    Check whether the '<' at pos starts a tag.

    Args:
        buffer: Text buffer being scanned.
        pos: Offset of a '<' byte.

    Returns:
        True if the byte after '<' exists and is not an evil sigil.
    """
    nxt = pos + 1
    return nxt < len(buffer) and buffer[nxt] not in EVIL_SIGILS


def closes_tag(buffer: bytearray, pos: int) -> bool:
    """Check whether pos holds the two-byte sequence '</'."""
    return buffer[pos] == LT and pos + 1 < len(buffer) and buffer[pos + 1] == SLASH


def find_tag_end(buffer: bytearray, start: int) -> Optional[int]:
    """
    Find the '>' that terminates a tag on the current line.

    The search stops at whichever of '>' or newline comes first, so a call
    never reads past the end of the tag or of the current line.

    Args:
        buffer: Text buffer being scanned.
        start: First offset to examine.

    Returns:
        Offset of the terminating '>', -1 if a newline comes first
        (unterminated tag), or None if the buffer ends before either.
    """
    match = _TAG_STOP.search(buffer, start)
    if match is None:
        return None
    end = match.start()
    if buffer[end] == NEWLINE:
        return -1
    return end


def classify_tag(buffer: bytearray, start: int, end: int) -> str:
    """
    Classify the tag spanning buffer[start:end + 1].

    A tag starting with '</' is CLOSING even when no tag is open; the
    scanner then leaves the level at 0 instead of counting it as an
    opening tag, so text after a stray closing tag keeps collapsing.

    Args:
        buffer: Text buffer being scanned.
        start: Offset of the '<'.
        end: Offset of the terminating '>'.

    Returns:
        One of OPENING, CLOSING or SELF_CLOSING.
    """
    if buffer[start + 1] == SLASH:
        return CLOSING
    if buffer[end - 1] == SLASH:
        return SELF_CLOSING
    return OPENING
