"""
Script metadata — ``##`` blocks embedded in single-file scripts.

Data flows strictly forward:

    text lines → classify_line → scan_blocks → extract_dependencies

Nothing here parses the host language; it is plain text scanning.
"""

from scriptmeta.core.services.script_meta.block_scanner import parse_header, scan_blocks
from scriptmeta.core.services.script_meta.dependency_extractor import (
    DEPENDENCY_BLOCK_TYPE,
    EXTENSION_PREFIX,
    extract_dependencies,
    is_dependency_block,
    is_extension_type,
)
from scriptmeta.core.services.script_meta.errors import (
    DisallowedHeaderExtraError,
    InvalidSpecifierError,
    ScriptMetadataError,
    ScriptSourceError,
    SpecifierValidationError,
)
from scriptmeta.core.services.script_meta.line_classifier import BLOCK_MARKER, classify_line
from scriptmeta.core.services.script_meta.source import (
    read_dependencies,
    read_script_lines,
    resolve_encoding,
    scan_script,
)
from scriptmeta.core.services.script_meta.validators import (
    SpecifierValidator,
    get_validator,
    validate_name_only,
    validate_pep508,
)

__all__ = [
    "BLOCK_MARKER",
    "DEPENDENCY_BLOCK_TYPE",
    "EXTENSION_PREFIX",
    "DisallowedHeaderExtraError",
    "InvalidSpecifierError",
    "ScriptMetadataError",
    "ScriptSourceError",
    "SpecifierValidationError",
    "SpecifierValidator",
    "classify_line",
    "extract_dependencies",
    "get_validator",
    "is_dependency_block",
    "is_extension_type",
    "parse_header",
    "read_dependencies",
    "read_script_lines",
    "resolve_encoding",
    "scan_blocks",
    "scan_script",
    "validate_name_only",
    "validate_pep508",
]
