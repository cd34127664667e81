"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path


MANIFEST_TEXT = """\
# Distribution files
Changes
lib/Module/Manifest.pm     Main module
Makefile.PL
README
t/01_compile.t
   t/02_parse.t
META.yml                   # generated

Makefile.PL
"""

SKIP_TEXT = """\
# Version control
\\B\\.svn\\b
\\B\\.git\\b

# Build artifacts
^Makefile$
^blib/
\\.bak$
"""


@pytest.fixture
def manifest_lines():
    """Return the lines of a sample MANIFEST file."""
    return MANIFEST_TEXT.splitlines(keepends=True)


@pytest.fixture
def skip_lines():
    """Return the lines of a sample MANIFEST.SKIP file."""
    return SKIP_TEXT.splitlines(keepends=True)


@pytest.fixture
def dist_dir(tmp_path):
    """Create a temporary distribution root with MANIFEST and MANIFEST.SKIP."""
    dist_path = tmp_path / "Module-Manifest"
    dist_path.mkdir()

    (dist_path / "MANIFEST").write_text(MANIFEST_TEXT)
    (dist_path / "MANIFEST.SKIP").write_text(SKIP_TEXT)

    return dist_path


@pytest.fixture
def other_dir(tmp_path):
    """Create a second directory holding only a MANIFEST.SKIP file."""
    other_path = tmp_path / "elsewhere"
    other_path.mkdir()

    (other_path / "MANIFEST.SKIP").write_text("\\.tmp$\n")

    return other_path
