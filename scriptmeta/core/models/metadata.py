"""
Metadata models — the artifacts of one scan over one script.

``BlockLine`` and ``MetadataBlock`` are derived, read-only values produced
while scanning.  ``DependencySpecifier`` is the only thing that outlives
the scan: it is what the dependency extractor yields.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class BlockLine:
    """A line that starts with the ``##`` marker."""
    payload: str                 # text after the marker, trimmed


@dataclass(frozen=True)
class MetadataBlock:
    """A typed run of contiguous ``##`` lines."""
    block_type: str              # "Script Dependencies", "X-Custom", ...
    header_extra: str = ""       # text after the colon on the header line
    body_lines: tuple[str, ...] = ()
    lineno: int = 0              # 1-based line of the header
    body_linenos: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict."""
        return {
            "block_type": self.block_type,
            "header_extra": self.header_extra,
            "body_lines": list(self.body_lines),
            "lineno": self.lineno,
        }


class DependencySpecifier(BaseModel):
    """A validated dependency requirement.

    Only ``raw`` and ``name`` are guaranteed; the other fields are filled
    in as far as the validator that produced the record understands the
    requirement grammar.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    name: str
    extras: list[str] = Field(default_factory=list)
    specifier: str = ""
    marker: str | None = None
    url: str | None = None
    lineno: int = 0

    def __str__(self) -> str:
        return self.raw
