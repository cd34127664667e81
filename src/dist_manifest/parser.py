"""
Line parser for MANIFEST and MANIFEST.SKIP files.

Both files share one syntax: one entry per line, leading whitespace is
ignored, lines starting with '#' are comments, and anything after the first
whitespace-delimited token is an inline comment.
"""

import logging
import re
import warnings
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .errors import DuplicateEntryWarning, InvalidRoleError, MalformedInputError

logger = logging.getLogger(__name__)

ENTRY_PATTERN = re.compile(r"^\s*([^\s#]\S*)")


class Role(str, Enum):
    """Which list a set of lines belongs to."""

    MANIFEST = "manifest"
    SKIP = "skip"

    @classmethod
    def coerce(cls, value: "Role | str") -> "Role":
        """Map a Role or its string value onto a Role.

        Raises:
            InvalidRoleError: If value names neither role.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidRoleError(value) from None


@dataclass(frozen=True)
class ParseResult:
    """Entries parsed from a list of lines."""

    entries: tuple[str, ...]
    duplicates: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


def extract_entry(line: str) -> str | None:
    """Return the first token of line, or None for blank and comment lines."""
    match = ENTRY_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse raw lines into a sorted, de-duplicated list of entries.

    Duplicates are collapsed to a single entry. Each one is logged and
    reported as a DuplicateEntryWarning, but parsing carries on.

    Args:
        lines: Lines of a MANIFEST or MANIFEST.SKIP file. Trailing newlines
            are allowed.

    Returns:
        ParseResult with the sorted entries and any duplicated tokens.

    Raises:
        MalformedInputError: If lines is not an iterable of strings.
    """
    if lines is None or isinstance(lines, (str, bytes)):
        raise MalformedInputError("Files/masks must be a sequence of lines")

    try:
        iterator = iter(lines)
    except TypeError:
        raise MalformedInputError(
            f"Files/masks must be a sequence of lines, got: {type(lines).__name__}"
        ) from None

    counts: Counter[str] = Counter()
    for lineno, line in enumerate(iterator, start=1):
        if not isinstance(line, str):
            raise MalformedInputError(
                f"Line {lineno} must be a string, got: {type(line).__name__}"
            )
        entry = extract_entry(line)
        if entry is not None:
            counts[entry] += 1

    duplicates = sorted(entry for entry, count in counts.items() if count > 1)
    for entry in duplicates:
        logger.warning("Duplicate file or mask %s", entry)
        warnings.warn(
            f"Duplicate file or mask {entry}",
            DuplicateEntryWarning,
            stacklevel=2,
        )

    return ParseResult(entries=tuple(sorted(counts)), duplicates=tuple(duplicates))
