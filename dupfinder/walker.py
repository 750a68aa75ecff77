"""
Recursive enumeration of regular files under a root directory.

Depth is unbounded but the walk keeps an explicit stack of pending
directory listings, so tree depth never turns into Python call depth.
Symlinks are never followed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

import structlog

from dupfinder.exceptions import TraversalError

logger = structlog.get_logger(__name__)


def _list_directory(directory: str) -> list[os.DirEntry]:
    """List one directory, sorted by name. The handle is closed on return."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise TraversalError(directory, e) from e

    entries.sort(key=lambda entry: entry.name)
    return entries


def _kind(entry: os.DirEntry) -> str:
    try:
        if entry.is_dir(follow_symlinks=False):
            return "dir"
        if entry.is_file(follow_symlinks=False):
            return "file"
    except OSError as e:
        raise TraversalError(entry.path, e) from e
    return "other"


def iter_files(
    root: Union[str, Path],
    on_directory: Optional[Callable[[str], None]] = None,
) -> Iterator[Path]:
    """
    Yield every regular file under ``root``, depth-first.

    Within a directory entries are visited in name order; a subdirectory is
    fully walked before the next sibling entry.

    Args:
        root: Directory to walk
        on_directory: Called with each directory path once it is listed

    Raises:
        TraversalError: A directory cannot be listed (aborts the walk)
    """
    root_str = os.fspath(root)
    stack = [iter(_list_directory(root_str))]
    if on_directory:
        on_directory(root_str)

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        kind = _kind(entry)
        if kind == "dir":
            stack.append(iter(_list_directory(entry.path)))
            if on_directory:
                on_directory(entry.path)
        elif kind == "file":
            yield Path(entry.path)
        else:
            logger.debug("dupfinder_entry_skipped", path=entry.path)
