"""
Script check use case — validate the metadata of one script or a tree.

Scanning and extraction fail fast; this layer turns those failures
into result objects so callers can report many scripts at once.
"""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from pathlib import Path

from scriptmeta.core.models.metadata import DependencySpecifier, MetadataBlock
from scriptmeta.core.models.settings import Settings
from scriptmeta.core.services.script_meta.dependency_extractor import (
    DEPENDENCY_BLOCK_TYPE,
    extract_dependencies,
    is_dependency_block,
    is_extension_type,
)
from scriptmeta.core.services.script_meta.errors import ScriptMetadataError
from scriptmeta.core.services.script_meta.source import scan_script
from scriptmeta.core.services.script_meta.validators import get_validator

logger = logging.getLogger(__name__)


@dataclass
class ScriptCheckResult:
    """Result of checking one script."""

    path: str
    valid: bool = False
    blocks: list[MetadataBlock] = field(default_factory=list)
    dependencies: list[DependencySpecifier] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_metadata(self) -> bool:
        return bool(self.blocks)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "valid": self.valid,
            "blocks": [b.to_dict() for b in self.blocks],
            "dependencies": [d.model_dump() for d in self.dependencies],
            "errors": self.errors,
            "warnings": self.warnings,
        }


@dataclass
class TreeCheckResult:
    """Result of checking every script under a directory."""

    root: str
    scripts: list[ScriptCheckResult] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(s.valid for s in self.scripts)

    @property
    def failed(self) -> list[ScriptCheckResult]:
        return [s for s in self.scripts if not s.valid]

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "valid": self.valid,
            "total": len(self.scripts),
            "with_metadata": sum(1 for s in self.scripts if s.has_metadata),
            "failed": len(self.failed),
            "scripts": [s.to_dict() for s in self.scripts],
        }


def check_script(path: Path | str, settings: Settings | None = None) -> ScriptCheckResult:
    """Scan one script and validate its dependency block(s).

    Args:
        path: Script file, or ``-`` for standard input.
        settings: Tool settings (default: built-in defaults).

    Returns:
        ScriptCheckResult; never raises for metadata or IO problems.
    """
    settings = settings or Settings()
    result = ScriptCheckResult(path=str(path))

    try:
        result.blocks = list(
            scan_script(path, honor_declaration=settings.encoding.honor_declaration)
        )
    except (OSError, UnicodeDecodeError, ScriptMetadataError) as e:
        result.errors.append(f"Cannot read script: {e}")
        return result

    dep_blocks = [b for b in result.blocks if is_dependency_block(b)]
    if len(dep_blocks) > 1:
        policy = (
            "only the first is used"
            if settings.dependencies.first_block_only
            else "all are used"
        )
        result.warnings.append(
            f"{len(dep_blocks)} '{DEPENDENCY_BLOCK_TYPE}' blocks found; {policy}"
        )

    for block in result.blocks:
        if is_extension_type(block.block_type):
            logger.debug("%s: extension block '%s'", path, block.block_type)
        elif not is_dependency_block(block):
            result.warnings.append(
                f"line {block.lineno}: unrecognised block type '{block.block_type}'"
            )

    validator = get_validator(settings.dependencies.validator)
    try:
        for spec in extract_dependencies(
            result.blocks,
            validator=validator,
            first_block_only=settings.dependencies.first_block_only,
        ):
            result.dependencies.append(spec)
    except ScriptMetadataError as e:
        result.errors.append(str(e))
        return result

    result.valid = True
    return result


def iter_scripts(root: Path, settings: Settings) -> list[Path]:
    """List script files under ``root`` matching the scan settings."""
    found: set[Path] = set()
    for pattern in settings.scan.include:
        for path in root.rglob(pattern):
            if not path.is_file():
                continue
            rel_parts = path.relative_to(root).parts
            if any(
                fnmatch.fnmatch(part, excl)
                for part in rel_parts
                for excl in settings.scan.exclude
            ):
                continue
            found.add(path)
    return sorted(found)


def check_tree(root: Path, settings: Settings | None = None) -> TreeCheckResult:
    """Check every script under ``root``."""
    settings = settings or Settings()
    result = TreeCheckResult(root=str(root))

    for path in iter_scripts(root, settings):
        result.scripts.append(check_script(path, settings))

    logger.info(
        "Checked %d scripts under %s, %d failed",
        len(result.scripts), root, len(result.failed),
    )
    return result
