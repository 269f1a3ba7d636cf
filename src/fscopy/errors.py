"""Typed errors raised by copy operations."""

from __future__ import annotations

from pathlib import Path


class FsCopyError(Exception):
    """Base class for every error raised by fscopy."""


class PreconditionError(FsCopyError, ValueError):
    """A source does not have the kind an operation requires.

    Always raised before the filesystem is touched.
    """


class AlreadyExistsError(FsCopyError, FileExistsError):
    def __init__(self, path: Path | str, operation: str) -> None:
        self.path = Path(path)
        self.operation = operation
        super().__init__(f"{operation}: destination already exists: {self.path}")


class CopyIOError(FsCopyError, OSError):
    """An underlying read, write, create or delete failed."""

    def __init__(self, path: Path | str, operation: str, cause: OSError) -> None:
        self.path = Path(path)
        self.operation = operation
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{operation}: {reason}: {self.path}")
        self.errno = cause.errno
