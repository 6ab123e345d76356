"""
Errors raised while reading, scanning, or consuming script metadata.

Malformed headers are never errors: a line that is not a valid header
is simply not a block.  Only the rules of the reserved dependency
block and the source-decoding layer fail hard.
"""

from __future__ import annotations


class ScriptMetadataError(Exception):
    """Base class for script metadata failures."""


class ScriptSourceError(ScriptMetadataError):
    """Raised when a script's encoding declaration cannot be honoured."""


class DisallowedHeaderExtraError(ScriptMetadataError):
    """Raised when the dependency block header carries text after the colon."""

    def __init__(self, block_type: str, header_extra: str, lineno: int = 0) -> None:
        self.block_type = block_type
        self.header_extra = header_extra
        self.lineno = lineno
        where = f"line {lineno}: " if lineno else ""
        super().__init__(
            f"{where}'{block_type}' header must end at the colon, "
            f"found {header_extra.strip()!r}"
        )


class SpecifierValidationError(ValueError):
    """Raised by a validator when a specifier string is rejected."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid dependency specifier {text!r}: {reason}")


class InvalidSpecifierError(ScriptMetadataError):
    """Raised when a dependency block line fails validation."""

    def __init__(self, text: str, reason: str, lineno: int = 0) -> None:
        self.text = text
        self.reason = reason
        self.lineno = lineno
        where = f"line {lineno}: " if lineno else ""
        super().__init__(f"{where}invalid dependency specifier {text!r}: {reason}")
