"""Path normalization and source/destination pairing."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from fscopy.errors import PreconditionError

PathLike = str | os.PathLike[str]
PathInput = PathLike | Iterable[PathLike]


def path_expand(path: PathLike) -> Path:
    """Expand ``~`` and make ``path`` absolute without resolving links.

    ``.`` and ``..`` segments are collapsed textually, so a symbolic link
    stays a link rather than being replaced by its target.
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def as_path_list(paths: PathInput) -> list[PathLike]:
    if isinstance(paths, (str, os.PathLike)):
        return [paths]
    return list(paths)


def path_tidy(paths: PathInput) -> list[Path]:
    return [path_expand(p) for p in as_path_list(paths)]


def pair_paths(paths: PathInput, new_paths: PathInput) -> list[tuple[Path, Path]]:
    """Pair sources with destinations by index.

    A single source paired with several destinations is broadcast to each of
    them. Any other length mismatch is rejected.
    """
    sources = path_tidy(paths)
    destinations = path_tidy(new_paths)

    if not sources:
        raise PreconditionError("no source paths given")
    if len(sources) == 1 and len(destinations) > 1:
        sources = sources * len(destinations)
    if len(sources) != len(destinations):
        raise PreconditionError(
            f"got {len(sources)} source path(s) but {len(destinations)} destination path(s)"
        )
    return list(zip(sources, destinations))


def rebase(entry: Path, root: Path, new_root: Path) -> Path:
    """Re-root ``entry`` (which lives under ``root``) onto ``new_root``."""
    relative = entry.relative_to(root)
    if relative == Path("."):
        return new_root
    return new_root / relative


def is_within(path: Path, root: Path) -> bool:
    """True if ``path`` is ``root`` or lies somewhere below it."""
    return path == root or root in path.parents
