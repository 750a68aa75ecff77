"""
Directory scanner with SHA256 deduplication.

Features:
- Recursive walk (explicit stack, no symlink following)
- Whole-file SHA256 hashing
- Digest-keyed grouping into a DuplicateIndex
- Progress callback every N hashed files

Fail-fast: the first directory or file that cannot be read aborts the scan.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Optional, Union

import structlog

from dupfinder.hasher import hash_file
from dupfinder.index import DuplicateIndex
from dupfinder.models import ScanConfig, ScanStats
from dupfinder.walker import iter_files

logger = structlog.get_logger(__name__)


class DuplicateScanner:
    """
    Build a DuplicateIndex for one directory tree.

    Single pass, single thread: walk, hash, insert.
    """

    def __init__(
        self,
        config: ScanConfig,
        progress_callback: Optional[Callable[[ScanStats], None]] = None,
    ):
        """
        Initialize scanner.

        Args:
            config: Scan configuration
            progress_callback: Optional callback for progress updates
        """
        self.config = config
        self.progress_callback = progress_callback
        self.stats = ScanStats()

    def scan(self) -> DuplicateIndex:
        """
        Walk ``config.root_path`` and group every regular file by digest.

        Returns:
            DuplicateIndex with one record per distinct content

        Raises:
            TraversalError: A directory cannot be listed
            FileReadError: A file cannot be read
        """
        start_time = time.time()
        self.stats = ScanStats()
        index = DuplicateIndex()

        logger.info("dupfinder_scan_started", root_path=str(self.config.root_path))

        for file_path in iter_files(self.config.root_path, on_directory=self._on_directory):
            digest, size = hash_file(file_path)
            record = index.add(digest, file_path, size)

            self.stats.files_hashed += 1
            self.stats.bytes_hashed += size
            if len(record.paths) == 2:
                self.stats.duplicate_sets += 1

            if self.progress_callback and self.stats.files_hashed % self.config.progress_interval == 0:
                self.progress_callback(self.stats)

        logger.info(
            "dupfinder_scan_completed",
            files_hashed=self.stats.files_hashed,
            bytes_hashed=self.stats.bytes_hashed,
            directories_listed=self.stats.directories_listed,
            duplicate_sets=self.stats.duplicate_sets,
            elapsed_seconds=round(time.time() - start_time, 3),
        )

        return index

    def _on_directory(self, directory: str) -> None:
        self.stats.directories_listed += 1
        self.stats.current_directory = directory


def scan_directory(root: Union[str, Path]) -> DuplicateIndex:
    """Scan ``root`` with the default configuration."""
    return DuplicateScanner(ScanConfig(root_path=Path(root))).scan()
