"""
Console report of duplicate sets.

Format:
    Hash set <sha256 hex> (filesize: <N> bytes):
     1 - "<path>"
     2 - "<path>"
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

import structlog

from dupfinder.index import DuplicateIndex
from dupfinder.models import Digest, FileRecord

logger = structlog.get_logger(__name__)


def printable(value: Union[str, Path]) -> str:
    """
    Render a path (or a message embedding one) for console output.

    Undecodable filename bytes come back from the OS as lone surrogates;
    they are shown as ``\\xNN`` escapes so strict output streams never fail.
    """
    return os.fsencode(value).decode("utf-8", "backslashreplace")


class DuplicateReporter:
    """Print duplicate sets. Never mutates the index."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    @staticmethod
    def format_set(digest: Digest, record: FileRecord) -> str:
        lines = [f"Hash set {digest} (filesize: {record.size} bytes):"]
        for position, path in enumerate(record.paths, start=1):
            lines.append(f' {position} - "{printable(path)}"')
        return "\n".join(lines)

    def report_set(self, digest: Digest, record: FileRecord) -> None:
        print(self.format_set(digest, record), file=self.out)

    def report(
        self,
        index: DuplicateIndex,
        after_set: Optional[Callable[[FileRecord], object]] = None,
    ) -> list[tuple[Digest, FileRecord]]:
        """
        Print every duplicate set of ``index``.

        Args:
            index: Completed index
            after_set: Called with each record right after it is printed
                (fix mode resolves the set there)

        Returns:
            The printed (digest, record) pairs, in printed order
        """
        duplicate_sets = index.duplicate_sets()
        for digest, record in duplicate_sets:
            self.report_set(digest, record)
            if after_set is not None:
                after_set(record)

        logger.info(
            "dupfinder_report_printed",
            duplicate_sets=len(duplicate_sets),
            duplicate_files=sum(len(record.paths) - 1 for _, record in duplicate_sets),
        )
        return duplicate_sets
