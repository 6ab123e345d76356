"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def write_script(tmp_path: Path):
    """Return a helper that writes a dedented script into tmp_path."""

    def _write(content: str, name: str = "script.py", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(textwrap.dedent(content).encode(encoding))
        return path

    return _write


@pytest.fixture
def deps_script(write_script) -> Path:
    """A script with a well-formed dependency block."""
    return write_script("""\
        #!/usr/bin/env python3
        # intro
        ## Script Dependencies:
        ##    requests
        ##    rich>=13.0

        import requests
    """)
