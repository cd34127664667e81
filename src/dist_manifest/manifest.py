"""
Distribution manifest object.

Loads a MANIFEST file and its optional MANIFEST.SKIP companion, and answers
whether a given path is excluded by the skip masks.
"""

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from .errors import NotReadableError
from .parser import ParseResult, Role, parse_lines

logger = logging.getLogger(__name__)


class Manifest:
    """A parsed MANIFEST file plus an optional list of skip masks.

    The tracked base directory is overwritten by every successful call to
    open(), so when MANIFEST and MANIFEST.SKIP live in different directories
    the last file opened wins.
    """

    MANIFEST_FILENAME = "MANIFEST"
    SKIP_FILENAME = "MANIFEST.SKIP"

    def __init__(
        self,
        manifest: str | Path | None = None,
        skipfile: str | Path | None = None,
    ):
        """Initialize the manifest, loading any files given.

        Args:
            manifest: Path to a MANIFEST file.
            skipfile: Path to a MANIFEST.SKIP file. Loaded before the
                manifest, so the base directory ends up as the manifest's.

        Raises:
            NotReadableError: If a given file cannot be read.
        """
        self._file: Path | None = None
        self._skipfile: Path | None = None
        self._dir: Path | None = None
        self._files: tuple[str, ...] = ()
        self._skip_masks: tuple[str, ...] = ()
        self._warnings: dict[Role, list[str]] = {Role.MANIFEST: [], Role.SKIP: []}

        if _is_path(skipfile):
            self.open(Role.SKIP, skipfile)
        if _is_path(manifest):
            self.open(Role.MANIFEST, manifest)

    @classmethod
    def from_directory(cls, directory: str | Path) -> "Manifest":
        """Load MANIFEST, and MANIFEST.SKIP if present, from a distribution root.

        Args:
            directory: Root directory of the distribution.

        Returns:
            Loaded Manifest.

        Raises:
            NotReadableError: If the directory has no readable MANIFEST.
        """
        directory = Path(directory)
        skip_path = directory / cls.SKIP_FILENAME
        return cls(
            manifest=directory / cls.MANIFEST_FILENAME,
            skipfile=skip_path if skip_path.exists() else None,
        )

    @property
    def file(self) -> Path | None:
        """Absolute path of the loaded MANIFEST file."""
        return self._file

    @property
    def skipfile(self) -> Path | None:
        """Absolute path of the loaded MANIFEST.SKIP file."""
        return self._skipfile

    @property
    def dir(self) -> Path | None:
        """Directory of the most recently opened file."""
        return self._dir

    @property
    def files(self) -> tuple[str, ...]:
        """Sorted relative paths listed in the manifest."""
        return self._files

    @property
    def file_count(self) -> int:
        """Number of distinct files in the manifest."""
        return len(self._files)

    @property
    def skip_masks(self) -> tuple[str, ...]:
        """Sorted regular expressions from the skip list."""
        return self._skip_masks

    @property
    def warnings(self) -> list[str]:
        """Diagnostics from the most recent parse of each list."""
        return self._warnings[Role.MANIFEST] + self._warnings[Role.SKIP]

    def __len__(self) -> int:
        return self.file_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file={self._file!r}, "
            f"skipfile={self._skipfile!r}, files={self.file_count}, "
            f"masks={len(self._skip_masks)})"
        )

    def open(self, role: Role | str, path: str | Path) -> None:
        """Read and parse a MANIFEST or MANIFEST.SKIP file.

        Relative paths are resolved against the current directory. On
        success the base directory becomes the file's directory.

        Args:
            role: Role.MANIFEST or Role.SKIP (or "manifest" / "skip").
            path: Path to the file.

        Raises:
            InvalidRoleError: If role is not a known role.
            NotReadableError: If the file is missing or unreadable.
        """
        role = Role.coerce(role)
        file = Path(os.path.abspath(path))

        try:
            with open(file, encoding="utf-8-sig", errors="surrogateescape") as f:
                lines = f.readlines()
        except OSError as e:
            raise NotReadableError(path, e) from e

        self._install(role, parse_lines(lines))

        if role is Role.SKIP:
            self._skipfile = file
        else:
            self._file = file
        self._dir = file.parent

        logger.debug("Loaded %s %s from %s", role.value, file.name, self._dir)

    def open_manifest(self, path: str | Path) -> None:
        """Read and parse a MANIFEST file."""
        self.open(Role.MANIFEST, path)

    def open_skip(self, path: str | Path) -> None:
        """Read and parse a MANIFEST.SKIP file."""
        self.open(Role.SKIP, path)

    def parse(self, role: Role | str, lines: Iterable[str]) -> None:
        """Parse in-memory lines, replacing the list for role.

        Example:
            manifest.parse("skip", [r"\\B\\.svn\\b", "^Build$", r"\\bMakefile$"])

        Raises:
            InvalidRoleError: If role is not a known role.
            MalformedInputError: If lines is not a sequence of strings.
        """
        role = Role.coerce(role)
        self._install(role, parse_lines(lines))

    def parse_manifest(self, lines: Iterable[str]) -> None:
        """Parse in-memory MANIFEST lines."""
        self.parse(Role.MANIFEST, lines)

    def parse_skip(self, lines: Iterable[str]) -> None:
        """Parse in-memory MANIFEST.SKIP lines."""
        self.parse(Role.SKIP, lines)

    def _install(self, role: Role, result: ParseResult) -> None:
        """Replace the entries for role with a parse result."""
        if role is Role.SKIP:
            self._skip_masks = result.entries
        else:
            self._files = result.entries
        self._warnings[role] = [
            f"Duplicate {role.value} entry: {entry}" for entry in result.duplicates
        ]

    def _relative(self, path: str | Path) -> str:
        """Express path relative to the base directory, unix-style."""
        path = os.fspath(path)
        if self._dir is not None and os.path.isabs(path):
            path = os.path.relpath(path, self._dir)
        return path.replace(os.sep, "/")

    def skipping_mask(self, path: str | Path) -> str | None:
        """Return the first skip mask matching path, or None.

        Masks are matched case-insensitively, exactly as written.
        """
        relative = self._relative(path)
        for mask in self._skip_masks:
            if re.search(mask, relative, re.IGNORECASE):
                return mask
        return None

    def skipped(self, path: str | Path) -> bool:
        """Check whether path matches any of the skip masks.

        Args:
            path: Absolute path, or path relative to the distribution root.

        Returns:
            True if the path should be skipped.
        """
        return self.skipping_mask(path) is not None

    def unskipped_files(self) -> list[str]:
        """Manifest entries not excluded by the skip list."""
        return [name for name in self._files if not self.skipped(name)]

    def get_summary(self) -> str:
        """Get a summary of the loaded lists.

        Returns:
            Human-readable summary string.
        """
        lines = [
            f"Manifest: {self._file or '(in memory)'} ({self.file_count} files)",
            f"Skip list: {self._skipfile or '(none)'} ({len(self._skip_masks)} masks)",
        ]

        warnings = self.warnings
        if warnings:
            lines.append(f"WARNINGS ({len(warnings)}):")
            for warning in warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines)


def _is_path(value: object) -> bool:
    if isinstance(value, os.PathLike):
        return True
    return isinstance(value, str) and value != ""
