"""Digest-keyed index of every scanned file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from dupfinder.models import Digest, FileRecord


class DuplicateIndex:
    """
    Mapping Digest -> FileRecord, filled by one traversal pass.

    Size is not re-checked when a path joins an existing record: equal
    SHA256 digests mean equal content.
    """

    def __init__(self):
        self._records: dict[Digest, FileRecord] = {}

    def add(self, digest: Digest, path: Path, size: int) -> FileRecord:
        """Insert ``path`` under ``digest`` and return its record."""
        record = self._records.get(digest)
        if record is None:
            record = FileRecord.first(path, size)
            self._records[digest] = record
        else:
            record.add_path(path)
        return record

    def get(self, digest: Digest) -> Optional[FileRecord]:
        return self._records.get(digest)

    def duplicate_sets(self) -> list[tuple[Digest, FileRecord]]:
        """Records holding two or more paths."""
        return [(digest, record) for digest, record in self._records.items() if record.is_duplicate]

    def __iter__(self) -> Iterator[tuple[Digest, FileRecord]]:
        return iter(self._records.items())

    def __len__(self) -> int:
        return len(self._records)
