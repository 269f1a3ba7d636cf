"""Recursive, link-aware copying of files, links and directory trees."""

from __future__ import annotations

from .copy import dir_copy, file_copy, link_copy
from .errors import AlreadyExistsError, CopyIOError, FsCopyError, PreconditionError
from .infrastructure.logger import setup_logging
from .kinds import COPY_AS, CopyAs, PathKind, path_kind
from .listing import dir_list, file_list, link_list, scan_tree
from .paths import path_expand, path_tidy
from .types import CopyRequest, TreeListing

__all__ = [
    # copy
    "dir_copy",
    "file_copy",
    "link_copy",
    # errors
    "AlreadyExistsError",
    "CopyIOError",
    "FsCopyError",
    "PreconditionError",
    # logging
    "setup_logging",
    # kinds
    "COPY_AS",
    "CopyAs",
    "PathKind",
    "path_kind",
    # listing
    "dir_list",
    "file_list",
    "link_list",
    "scan_tree",
    # paths
    "path_expand",
    "path_tidy",
    # types
    "CopyRequest",
    "TreeListing",
]
