"""
Line classifier — decide whether one line belongs to a metadata block.

A block line starts with ``##`` at column zero.  Anything after the
first two markers is the payload, including further ``#`` characters.
"""

from __future__ import annotations

from scriptmeta.core.models.metadata import BlockLine

BLOCK_MARKER = "##"


def classify_line(line: str) -> BlockLine | None:
    """Classify a single line of script text.

    Args:
        line: Raw line, with or without its terminator.

    Returns:
        ``BlockLine`` carrying the trimmed payload, or None if the line
        is ordinary text.
    """
    if not line.startswith(BLOCK_MARKER):
        return None
    return BlockLine(payload=line[len(BLOCK_MARKER):].strip())
