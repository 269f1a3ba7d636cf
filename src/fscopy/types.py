"""Copy domain types."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class CopyRequest(BaseModel):
    source: Path
    destination: Path
    overwrite: bool = False


class TreeListing(BaseModel):
    """Result of one recursive scan of a directory tree.

    All paths are absolute and start with ``root``. ``directories`` always
    begins with ``root`` itself.
    """

    root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)
    links: list[Path] = Field(default_factory=list)
