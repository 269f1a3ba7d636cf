"""Raw single-entry filesystem operations.

Every ``OSError`` is re-raised as a typed fscopy error that names the path
and the operation that failed.
"""

from __future__ import annotations

import errno
import os
import shutil
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from fscopy.errors import AlreadyExistsError, CopyIOError

if TYPE_CHECKING:
    from pathlib import Path

    from fscopy.infrastructure.config import CopySettings

CopyFunc = Callable[..., object]

_COPY_FUNCS: dict[str, CopyFunc] = {
    "none": shutil.copyfile,
    "mode": shutil.copy,
    "all": shutil.copy2,
}


def copy_function(settings: CopySettings) -> CopyFunc:
    """Pick the shutil copy function for the configured metadata mode."""
    return _COPY_FUNCS[settings.copy_metadata]


def copy_file_bytes(src: Path, dst: Path, overwrite: bool, copy_func: CopyFunc = shutil.copy) -> None:
    """Copy the content of ``src`` to ``dst``.

    ``dst`` names the new file itself, never a directory to copy into.
    """
    if os.path.lexists(dst):
        if not overwrite:
            raise AlreadyExistsError(dst, "copy")
        if dst.is_symlink():
            # Replace the link itself rather than writing through it.
            delete_link([dst])
        elif dst.is_dir():
            raise CopyIOError(dst, "copy", IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR)))

    try:
        copy_func(src, dst)
    except OSError as err:
        raise CopyIOError(err.filename or src, "copy", err) from err


def read_link(path: Path) -> str:
    """Return the target recorded in a link, exactly as stored."""
    try:
        return os.readlink(path)
    except OSError as err:
        raise CopyIOError(path, "readlink", err) from err


def create_link(target: str, new_path: Path) -> None:
    try:
        os.symlink(target, new_path)
    except FileExistsError as err:
        raise AlreadyExistsError(new_path, "link") from err
    except OSError as err:
        raise CopyIOError(new_path, "link", err) from err


def create_dirs(paths: Iterable[Path]) -> None:
    """Create each directory along with any missing parents."""
    for path in paths:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except FileExistsError as err:
            # mkdir(exist_ok=True) only raises this when a non-directory is in the way
            raise AlreadyExistsError(path, "mkdir") from err
        except OSError as err:
            raise CopyIOError(path, "mkdir", err) from err


def delete_dir(paths: Iterable[Path]) -> None:
    """Remove each directory tree. Links inside are removed, not followed."""
    for path in paths:
        try:
            shutil.rmtree(path)
        except OSError as err:
            raise CopyIOError(path, "rmtree", err) from err


def delete_link(paths: Iterable[Path]) -> None:
    for path in paths:
        try:
            path.unlink()
        except OSError as err:
            raise CopyIOError(path, "unlink", err) from err
