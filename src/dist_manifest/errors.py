"""Exceptions and warnings raised while loading MANIFEST and MANIFEST.SKIP files."""

from pathlib import Path


class ManifestError(Exception):
    """Base class for all manifest errors."""


class InvalidRoleError(ManifestError, ValueError):
    """Raised when a role is neither 'manifest' nor 'skip'."""

    def __init__(self, role: object):
        self.role = role
        super().__init__(f"Available types are: skip, manifest (got: {role!r})")


class MalformedInputError(ManifestError, TypeError):
    """Raised when parse input is not a sequence of lines."""


class NotReadableError(ManifestError):
    """Raised when a manifest or skip file cannot be read.

    Attributes:
        path: The path as given by the caller.
        cause: The underlying OS error, if there was one.
    """

    def __init__(self, path: str | Path, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        message = f"Failed to load {path}"
        if cause is not None:
            message += f": {cause}"
        else:
            message += ": not a readable file"
        super().__init__(message)


class DuplicateEntryWarning(UserWarning):
    """Issued when the same file or mask appears more than once."""
