"""Recursive, non-following enumeration of directory trees."""

from __future__ import annotations

import os
from collections.abc import Collection
from typing import TYPE_CHECKING

from fscopy.errors import CopyIOError, PreconditionError
from fscopy.kinds import COPY_AS, FILE_LIKE_KINDS, CopyAs, PathKind, is_dir, kind_from_mode
from fscopy.types import TreeListing

if TYPE_CHECKING:
    from pathlib import Path


def _entry_kind(entry: os.DirEntry[str]) -> PathKind:
    try:
        return kind_from_mode(entry.stat(follow_symlinks=False).st_mode)
    except OSError as err:
        raise CopyIOError(entry.path, "stat", err) from err


def scan_tree(root: Path, kinds: Collection[PathKind] = FILE_LIKE_KINDS) -> TreeListing:
    """Walk ``root`` once and partition its entries by how they are copied.

    Links are recorded but never followed, so a link to a directory shows up
    in ``links`` and its contents are not visited. Only file-like entries whose
    kind is in ``kinds`` are kept.
    """
    if not is_dir(root):
        raise PreconditionError(f"not a directory: {root}")

    listing = TreeListing(root=root, directories=[root])

    def walk(dir_path: Path) -> None:
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as err:
            raise CopyIOError(dir_path, "list", err) from err

        for entry in entries:
            entry_path = dir_path / entry.name
            kind = _entry_kind(entry)
            action = COPY_AS[kind]
            if action is CopyAs.DIRECTORY:
                listing.directories.append(entry_path)
                walk(entry_path)
            elif action is CopyAs.LINK:
                listing.links.append(entry_path)
            elif kind in kinds:
                listing.files.append(entry_path)

    walk(root)
    return listing


def dir_list(root: Path) -> list[Path]:
    """Every directory under ``root``, starting with ``root`` itself."""
    return scan_tree(root).directories


def file_list(root: Path, kinds: Collection[PathKind] = FILE_LIKE_KINDS) -> list[Path]:
    """Every file-like entry under ``root`` whose kind is in ``kinds``."""
    return scan_tree(root, kinds).files


def link_list(root: Path) -> list[Path]:
    return scan_tree(root).links
