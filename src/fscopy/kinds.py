"""Filesystem entry kinds and how each one is copied."""

from __future__ import annotations

import os
import stat
from enum import Enum
from pathlib import Path

from fscopy.errors import CopyIOError


class PathKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "FIFO"
    SOCKET = "socket"
    CHARACTER_DEVICE = "character_device"
    BLOCK_DEVICE = "block_device"
    UNKNOWN = "unknown"


class CopyAs(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"


COPY_AS: dict[PathKind, CopyAs] = {
    PathKind.FILE: CopyAs.FILE,
    PathKind.DIRECTORY: CopyAs.DIRECTORY,
    PathKind.SYMLINK: CopyAs.LINK,
    PathKind.FIFO: CopyAs.FILE,
    PathKind.SOCKET: CopyAs.FILE,
    PathKind.CHARACTER_DEVICE: CopyAs.FILE,
    PathKind.BLOCK_DEVICE: CopyAs.FILE,
    PathKind.UNKNOWN: CopyAs.FILE,
}

FILE_LIKE_KINDS: frozenset[PathKind] = frozenset(kind for kind, action in COPY_AS.items() if action is CopyAs.FILE)


def kind_from_mode(mode: int) -> PathKind:
    if stat.S_ISLNK(mode):
        return PathKind.SYMLINK
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    if stat.S_ISREG(mode):
        return PathKind.FILE
    if stat.S_ISFIFO(mode):
        return PathKind.FIFO
    if stat.S_ISSOCK(mode):
        return PathKind.SOCKET
    if stat.S_ISCHR(mode):
        return PathKind.CHARACTER_DEVICE
    if stat.S_ISBLK(mode):
        return PathKind.BLOCK_DEVICE
    return PathKind.UNKNOWN


def path_kind(path: Path) -> PathKind:
    """Classify ``path`` without following symbolic links."""
    try:
        return kind_from_mode(os.lstat(path).st_mode)
    except OSError as err:
        raise CopyIOError(path, "stat", err) from err


def is_dir(path: Path) -> bool:
    """True for a real directory; a link to a directory does not count."""
    return path.is_dir() and not path.is_symlink()


def is_link(path: Path) -> bool:
    return path.is_symlink()


def dir_exists(path: Path) -> bool:
    return path.is_dir()


def link_exists(path: Path) -> bool:
    return path.is_symlink()
