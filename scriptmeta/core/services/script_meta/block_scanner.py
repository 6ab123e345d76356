"""
Block scanner — segment a stream of lines into metadata blocks.

The scanner never looks at the host language's grammar.  It walks the
lines once, front to back, and yields each block as soon as the line
that ends it (or the end of input) is reached.

Public API:
    parse_header(payload)  → (block_type, header_extra) or None
    scan_blocks(lines)     → lazy iterator of MetadataBlock
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from scriptmeta.core.models.metadata import MetadataBlock
from scriptmeta.core.services.script_meta.line_classifier import classify_line

logger = logging.getLogger(__name__)


def parse_header(payload: str) -> tuple[str, str] | None:
    """Split a candidate header payload into type and trailing text.

    A header is ``<block_type>:[<header_extra>]``.  The payload is not a
    header when it has no colon, when the type is empty, or when
    whitespace sits directly before the colon.
    """
    block_type, colon, header_extra = payload.partition(":")
    if not colon or not block_type:
        return None
    if block_type != block_type.rstrip():
        return None
    return block_type, header_extra


class _BlockBuilder:
    """Accumulates the body of the block currently being read."""

    def __init__(self, block_type: str, header_extra: str, lineno: int) -> None:
        self.block_type = block_type
        self.header_extra = header_extra
        self.lineno = lineno
        self.body: list[str] = []
        self.linenos: list[int] = []

    def add(self, payload: str, lineno: int) -> None:
        if payload:
            self.body.append(payload)
            self.linenos.append(lineno)

    def build(self) -> MetadataBlock:
        return MetadataBlock(
            block_type=self.block_type,
            header_extra=self.header_extra,
            body_lines=tuple(self.body),
            lineno=self.lineno,
            body_linenos=tuple(self.linenos),
        )


def scan_blocks(lines: Iterable[str]) -> Iterator[MetadataBlock]:
    """Yield every metadata block found in ``lines``, in order.

    The input is consumed lazily and only once.  Blank ``##`` lines are
    dropped from the body without ending the block; the first line that
    is not a ``##`` line ends it.

    Args:
        lines: Any iterable of text lines (an open file works).

    Yields:
        MetadataBlock for each valid header and its contiguous body.
    """
    current: _BlockBuilder | None = None

    for lineno, line in enumerate(lines, start=1):
        block_line = classify_line(line)

        if block_line is None:
            if current is not None:
                yield current.build()
                current = None
            continue

        if current is not None:
            current.add(block_line.payload, lineno)
            continue

        header = parse_header(block_line.payload)
        if header is None:
            logger.debug("line %d: not a block header: %r", lineno, block_line.payload)
            continue

        block_type, header_extra = header
        logger.debug("line %d: block '%s' starts", lineno, block_type)
        current = _BlockBuilder(block_type, header_extra, lineno)

    if current is not None:
        yield current.build()
