"""
Deletion of the unselected copies of a duplicate set.

Features:
- os.remove by default, send2trash (OS recycle bin) on request
- Per-file error isolation: one failure never stops the others
- Keeper check: nothing is deleted if the kept copy has vanished
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, TextIO

import send2trash
import structlog

from dupfinder.models import FileRecord
from dupfinder.reporter import printable

logger = structlog.get_logger(__name__)


class DeletionResult:
    """Result of deleting one duplicate set."""

    def __init__(self):
        self.deleted: int = 0
        self.errors: int = 0
        self.bytes_reclaimed: int = 0
        self.deleted_files: list[Path] = []
        self.error_details: list[tuple[Path, str]] = []  # (file_path, error)


class FileDeleter:
    """
    Delete every path of a FileRecord except the one to keep.

    Failures are printed to stderr, logged and recorded; they never raise.
    """

    def __init__(
        self,
        use_trash: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize deleter.

        Args:
            use_trash: Send files to the recycle bin instead of unlinking them
            stdout: Stream for "Deleting" lines
            stderr: Stream for deletion failures
        """
        self.use_trash = use_trash
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def delete_except(self, record: FileRecord, keep_index: int) -> DeletionResult:
        """
        Delete all paths of ``record`` but ``record.paths[keep_index]``.

        Args:
            record: Duplicate set
            keep_index: 0-based index of the path to keep

        Returns:
            DeletionResult with counts and details
        """
        if not 0 <= keep_index < len(record.paths):
            raise IndexError(f"keep index {keep_index} out of range for {len(record.paths)} paths")

        result = DeletionResult()
        keeper = record.paths[keep_index]
        to_delete = [path for idx, path in enumerate(record.paths) if idx != keep_index]

        if not keeper.exists():
            reason = f"kept file no longer exists: {keeper}"
            for path in to_delete:
                self._record_error(result, path, reason)
            logger.info("dupfinder_keeper_missing", keeper=str(keeper), skipped=len(to_delete))
            return result

        for path in to_delete:
            print(f' Deleting "{printable(path)}"', file=self.stdout)
            try:
                self._remove(path)
            except OSError as e:
                self._record_error(result, path, str(e))
                continue

            result.deleted += 1
            result.bytes_reclaimed += record.size
            result.deleted_files.append(path)
            logger.info("dupfinder_file_deleted", file_path=str(path), size_bytes=record.size, trash=self.use_trash)

        return result

    def _remove(self, path: Path) -> None:
        if self.use_trash:
            send2trash.send2trash(str(path))
        else:
            os.remove(path)

    def _record_error(self, result: DeletionResult, path: Path, message: str) -> None:
        result.errors += 1
        result.error_details.append((path, message))
        print(f"Unable to remove file: {printable(message)}", file=self.stderr)
        logger.info("dupfinder_delete_failed", file_path=str(path), error=message)
