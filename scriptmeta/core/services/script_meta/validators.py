"""
Specifier validators — turn one dependency line into a DependencySpecifier.

A validator is any callable that accepts a trimmed, non-blank string and
returns a ``DependencySpecifier`` or raises ``SpecifierValidationError``.
The extractor only relies on that contract, so stricter or looser
grammars can be swapped in without touching the scanner.

Built-in validators:
    pep508  — full requirement grammar, via ``packaging``
    name    — name token only; the rest of the line is kept verbatim
"""

from __future__ import annotations

import re
from typing import Protocol

from packaging.requirements import InvalidRequirement, Requirement

from scriptmeta.core.models.metadata import DependencySpecifier
from scriptmeta.core.services.script_meta.errors import SpecifierValidationError

# Project name production from the dependency specifier grammar
_NAME_RE = re.compile(r"^([A-Z0-9]|[A-Z0-9][A-Z0-9._-]*[A-Z0-9])(?![A-Z0-9._-])", re.IGNORECASE)


class SpecifierValidator(Protocol):
    """Capability interface for specifier validation."""

    def __call__(self, text: str) -> DependencySpecifier: ...


def validate_pep508(text: str) -> DependencySpecifier:
    """Validate ``text`` against the full requirement grammar."""
    try:
        req = Requirement(text)
    except InvalidRequirement as e:
        raise SpecifierValidationError(text, str(e)) from e

    return DependencySpecifier(
        raw=text,
        name=req.name,
        extras=sorted(req.extras),
        specifier=str(req.specifier),
        marker=str(req.marker) if req.marker is not None else None,
        url=req.url,
    )


def validate_name_only(text: str) -> DependencySpecifier:
    """Check only that ``text`` starts with a valid name token."""
    match = _NAME_RE.match(text)
    if not match:
        raise SpecifierValidationError(text, "does not start with a package name")

    name = match.group(1)
    return DependencySpecifier(raw=text, name=name, specifier=text[len(name):].strip())


VALIDATORS: dict[str, SpecifierValidator] = {
    "pep508": validate_pep508,
    "name": validate_name_only,
}


def get_validator(name: str) -> SpecifierValidator:
    """Look up a built-in validator by name.

    Raises:
        ValueError: If no validator is registered under ``name``.
    """
    try:
        return VALIDATORS[name]
    except KeyError:
        known = ", ".join(sorted(VALIDATORS))
        raise ValueError(f"Unknown validator '{name}' (expected one of: {known})") from None
