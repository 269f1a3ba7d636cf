"""Tree-building helpers for copy tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def make_tree(root: Path) -> Path:
    """Build a small tree: a/, a/b/, a/x, a/b/y and a/lnk -> ../somewhere."""
    top = root / "a"
    (top / "b").mkdir(parents=True)
    (top / "x").write_text("x content")
    (top / "b" / "y").write_text("y content")
    os.symlink("../somewhere", top / "lnk")
    return top


def snapshot(root: Path) -> dict[str, str]:
    """Describe every entry under ``root`` as relative path -> kind/content."""
    result: dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, root)
            if os.path.islink(full):
                result[rel] = "link:" + os.readlink(full)
            elif os.path.isdir(full):
                result[rel] = "dir"
            else:
                with open(full, encoding="utf-8") as f:
                    result[rel] = "file:" + f.read()
    return result
