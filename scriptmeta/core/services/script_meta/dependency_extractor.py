"""
Dependency extractor — consume the reserved ``Script Dependencies`` block.

Rules:
  - the block type must equal ``Script Dependencies`` exactly
  - ``X-`` types are user extensions and never carry standard meaning
  - the header must end at the colon
  - every body line is one specifier; the first invalid line aborts
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from scriptmeta.core.models.metadata import DependencySpecifier, MetadataBlock
from scriptmeta.core.services.script_meta.errors import (
    DisallowedHeaderExtraError,
    InvalidSpecifierError,
    SpecifierValidationError,
)
from scriptmeta.core.services.script_meta.validators import (
    SpecifierValidator,
    validate_pep508,
)

logger = logging.getLogger(__name__)

DEPENDENCY_BLOCK_TYPE = "Script Dependencies"
EXTENSION_PREFIX = "X-"


def is_extension_type(block_type: str) -> bool:
    """True for user-defined ``X-`` block types."""
    return block_type.startswith(EXTENSION_PREFIX)


def is_dependency_block(block: MetadataBlock) -> bool:
    """True if ``block`` is the reserved dependency block type."""
    if is_extension_type(block.block_type):
        return False
    return block.block_type == DEPENDENCY_BLOCK_TYPE


def extract_dependencies(
    blocks: Iterable[MetadataBlock],
    validator: SpecifierValidator = validate_pep508,
    first_block_only: bool = False,
) -> Iterator[DependencySpecifier]:
    """Yield validated specifiers from every dependency block, in file order.

    Args:
        blocks: Blocks from ``scan_blocks`` (consumed lazily).
        validator: Called once per body line.
        first_block_only: Stop after the first dependency block instead of
            reading the rest of the stream.

    Raises:
        DisallowedHeaderExtraError: A dependency header has text after the colon.
        InvalidSpecifierError: The validator rejected a body line.
    """
    for block in blocks:
        if not is_dependency_block(block):
            logger.debug("line %d: skipping block '%s'", block.lineno, block.block_type)
            continue

        if block.header_extra:
            raise DisallowedHeaderExtraError(block.block_type, block.header_extra, block.lineno)

        logger.info(
            "line %d: dependency block with %d entries", block.lineno, len(block.body_lines)
        )

        linenos = block.body_linenos
        if len(linenos) != len(block.body_lines):
            # Hand-built blocks may carry no (or partial) positions
            linenos = (0,) * len(block.body_lines)
        for text, lineno in zip(block.body_lines, linenos):
            try:
                spec = validator(text)
            except SpecifierValidationError as e:
                raise InvalidSpecifierError(text, e.reason, lineno) from e
            yield spec.model_copy(update={"lineno": lineno})

        if first_block_only:
            return
