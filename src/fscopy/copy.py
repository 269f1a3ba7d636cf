"""Copy files, links and whole directory trees.

All three operations take one or more sources and matching destinations and
return the normalized destination paths. Preconditions are checked for the
whole batch before anything is written; after that the first failure
propagates and the remaining pairs are not attempted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fscopy.errors import FsCopyError, PreconditionError
from fscopy.infrastructure.config import load_settings
from fscopy.infrastructure.logger import logger
from fscopy.kinds import is_dir, is_link, link_exists
from fscopy.listing import scan_tree
from fscopy.paths import PathInput, is_within, pair_paths, rebase
from fscopy.primitives import (
    CopyFunc,
    copy_file_bytes,
    copy_function,
    create_dirs,
    create_link,
    delete_dir,
    delete_link,
    read_link,
)
from fscopy.types import CopyRequest

if TYPE_CHECKING:
    from pathlib import Path


def _requests(paths: PathInput, new_paths: PathInput, overwrite: bool) -> list[CopyRequest]:
    return [
        CopyRequest(source=src, destination=dst, overwrite=bool(overwrite))
        for src, dst in pair_paths(paths, new_paths)
    ]


def _copy_files(requests: list[CopyRequest], copy_func: CopyFunc) -> None:
    for req in requests:
        copy_file_bytes(req.source, req.destination, req.overwrite, copy_func)


def _copy_links(requests: list[CopyRequest]) -> None:
    for req in requests:
        if req.overwrite and link_exists(req.destination):
            delete_link([req.destination])
        create_link(read_link(req.source), req.destination)


def file_copy(paths: PathInput, new_paths: PathInput, overwrite: bool = False) -> list[Path]:
    """Copy files (or special files) to new paths.

    Raises AlreadyExistsError if a destination exists and ``overwrite`` is
    false.
    """
    requests = _requests(paths, new_paths, overwrite)
    copy_func = copy_function(load_settings())
    try:
        _copy_files(requests, copy_func)
    except FsCopyError as err:
        logger.warning("File copy failed", error=str(err))
        raise
    logger.debug("Copied files", count=len(requests))
    return [req.destination for req in requests]


def link_copy(paths: PathInput, new_paths: PathInput, overwrite: bool = False) -> list[Path]:
    """Create new links pointing at the same targets as ``paths``.

    Targets are copied verbatim, so relative and dangling links stay as they
    are. With ``overwrite``, an existing link at the destination is replaced;
    any other existing entry still raises AlreadyExistsError.
    """
    requests = _requests(paths, new_paths, overwrite)

    not_links = [str(req.source) for req in requests if not is_link(req.source)]
    if not_links:
        raise PreconditionError(f"link_copy sources must be symbolic links: {', '.join(not_links)}")

    try:
        _copy_links(requests)
    except FsCopyError as err:
        logger.warning("Link copy failed", error=str(err))
        raise
    logger.debug("Copied links", count=len(requests))
    return [req.destination for req in requests]


def _copy_tree(req: CopyRequest, copy_func: CopyFunc) -> None:
    source, destination = req.source, req.destination

    if req.overwrite:
        if link_exists(destination):
            logger.debug("Removing existing destination link", destination=str(destination))
            delete_link([destination])
        elif is_dir(destination):
            logger.debug("Removing existing destination", destination=str(destination))
            delete_dir([destination])

    listing = scan_tree(source)

    logger.debug("Creating directories", destination=str(destination), count=len(listing.directories))
    create_dirs(rebase(d, source, destination) for d in listing.directories)

    # Destination directories now exist, so files and links can be placed.
    if listing.files:
        logger.debug("Copying files", destination=str(destination), count=len(listing.files))
        _copy_files(
            [
                CopyRequest(source=f, destination=rebase(f, source, destination), overwrite=False)
                for f in listing.files
            ],
            copy_func,
        )

    if listing.links:
        logger.debug("Copying links", destination=str(destination), count=len(listing.links))
        _copy_links(
            [
                CopyRequest(source=lnk, destination=rebase(lnk, source, destination), overwrite=False)
                for lnk in listing.links
            ]
        )

    logger.info(
        "Copied directory",
        source=str(source),
        destination=str(destination),
        directories=len(listing.directories),
        files=len(listing.files),
        links=len(listing.links),
    )


def _check_tree_requests(requests: list[CopyRequest]) -> None:
    not_dirs = [str(req.source) for req in requests if not is_dir(req.source)]
    if not_dirs:
        raise PreconditionError(f"dir_copy sources must be directories: {', '.join(not_dirs)}")

    nested = [str(req.destination) for req in requests if is_within(req.destination, req.source)]
    if nested:
        raise PreconditionError(f"dir_copy destination cannot be the source or inside it: {', '.join(nested)}")

    # The overwrite pre-clean removes the whole destination, which must not
    # hold any source of the batch.
    clobbered = [
        f"{req.destination} (contains {other.source})"
        for req in requests
        if req.overwrite
        for other in requests
        if is_within(other.source, req.destination)
    ]
    if clobbered:
        raise PreconditionError(f"dir_copy overwrite would delete a source: {', '.join(clobbered)}")


def dir_copy(paths: PathInput, new_paths: PathInput, overwrite: bool = False) -> list[Path]:
    """Recursively copy directories, recreating files and links inside them.

    With ``overwrite``, an existing destination directory is deleted first so
    the result never mixes old and new trees. Without it, existing directories
    are merged into but any file or link already present raises
    AlreadyExistsError.
    """
    requests = _requests(paths, new_paths, overwrite)
    _check_tree_requests(requests)
    copy_func = copy_function(load_settings())

    for req in requests:
        try:
            _copy_tree(req, copy_func)
        except FsCopyError as err:
            logger.warning("Directory copy failed", source=str(req.source), error=str(err))
            raise

    return [req.destination for req in requests]
