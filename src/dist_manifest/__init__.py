"""Parse and examine distribution MANIFEST and MANIFEST.SKIP files."""

from .errors import (
    DuplicateEntryWarning,
    InvalidRoleError,
    MalformedInputError,
    ManifestError,
    NotReadableError,
)
from .manifest import Manifest
from .parser import ParseResult, Role, extract_entry, parse_lines

__all__ = [
    "DuplicateEntryWarning",
    "InvalidRoleError",
    "MalformedInputError",
    "Manifest",
    "ManifestError",
    "NotReadableError",
    "ParseResult",
    "Role",
    "extract_entry",
    "parse_lines",
]
