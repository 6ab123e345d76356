"""
Script source — read a script as text, one line at a time.

Scripts are treated strictly as text files.  The encoding is taken from
a Python coding declaration (or UTF-8 BOM) when asked to honour it, and
is UTF-8 otherwise.  The file handle lives exactly as long as the line
iterator: it is closed when the iterator is exhausted, fails, or is
closed early.

Public API:
    resolve_encoding(path)        → codec name
    read_script_lines(path)       → lazy iterator of lines
    scan_script(path)             → lazy iterator of MetadataBlock
    read_dependencies(path)       → lazy iterator of DependencySpecifier
"""

from __future__ import annotations

import codecs
import logging
import re
import sys
import tokenize
from collections.abc import Iterator
from pathlib import Path

from scriptmeta.core.models.metadata import DependencySpecifier, MetadataBlock
from scriptmeta.core.services.script_meta.block_scanner import scan_blocks
from scriptmeta.core.services.script_meta.dependency_extractor import extract_dependencies
from scriptmeta.core.services.script_meta.errors import ScriptSourceError
from scriptmeta.core.services.script_meta.validators import (
    SpecifierValidator,
    validate_pep508,
)

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
STDIN_PATH = "-"

# Coding declaration per the host language's source-encoding convention
_COOKIE_RE = re.compile(rb"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")


def resolve_encoding(path: Path, honor_declaration: bool = True) -> str:
    """Pick the codec used to decode ``path``.

    Only a BOM or a coding declaration on the first two lines changes the
    codec.  A file with neither is UTF-8, and undecodable bytes surface as
    ``UnicodeDecodeError`` once the lines are read.

    Raises:
        ScriptSourceError: The coding declaration names an unknown codec
            or contradicts a BOM.
        OSError: The file cannot be opened.
    """
    if not honor_declaration:
        return DEFAULT_ENCODING

    with open(path, "rb") as fh:
        head = [fh.readline(), fh.readline()]

    has_cookie = any(_COOKIE_RE.match(line.removeprefix(codecs.BOM_UTF8)) for line in head)
    if not has_cookie:
        if head[0].startswith(codecs.BOM_UTF8):
            return "utf-8-sig"
        return DEFAULT_ENCODING

    lines = iter(head)
    try:
        encoding, _ = tokenize.detect_encoding(lambda: next(lines, b""))
    except SyntaxError as e:
        raise ScriptSourceError(f"{path}: {e}") from e

    logger.debug("Decoding %s as %s", path, encoding)
    return encoding


def read_script_lines(
    path: Path | str,
    honor_declaration: bool = True,
) -> Iterator[str]:
    """Yield the lines of a script, decoding lazily.

    ``-`` reads standard input as UTF-8.
    """
    if str(path) == STDIN_PATH:
        for raw in sys.stdin.buffer:
            yield raw.decode(DEFAULT_ENCODING)
        return

    path = Path(path)
    encoding = resolve_encoding(path, honor_declaration)
    with open(path, encoding=encoding) as fh:
        yield from fh


def scan_script(path: Path | str, honor_declaration: bool = True) -> Iterator[MetadataBlock]:
    """Yield every metadata block in a script file."""
    return scan_blocks(read_script_lines(path, honor_declaration))


def read_dependencies(
    path: Path | str,
    validator: SpecifierValidator = validate_pep508,
    first_block_only: bool = False,
    honor_declaration: bool = True,
) -> Iterator[DependencySpecifier]:
    """Yield the validated dependencies declared in a script file."""
    return extract_dependencies(
        scan_script(path, honor_declaration),
        validator=validator,
        first_block_only=first_block_only,
    )
