"""
Pydantic models for dupfinder.

Models:
- Digest: SHA256 content fingerprint (32 bytes)
- FileRecord: All paths sharing one digest, plus their size
- Selection: Outcome of one "which file to keep" prompt
- ScanConfig: Scan configuration
- ScanStats: Running scan counters
"""

from __future__ import annotations

import functools
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DIGEST_SIZE = 32


@functools.total_ordering
class Digest(BaseModel):
    """SHA256 fingerprint of a file's content. Compared byte-wise."""

    model_config = ConfigDict(frozen=True)

    value: bytes = Field(min_length=DIGEST_SIZE, max_length=DIGEST_SIZE)

    @property
    def hex(self) -> str:
        return self.value.hex()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.hex


class FileRecord(BaseModel):
    """
    Every path known to map to one digest.

    Same content implies same size, so ``size`` is stored once. Paths are
    kept in discovery order and never removed during a scan.
    """

    paths: list[Path] = Field(default_factory=list)
    size: int = Field(ge=0, description="Shared file size in bytes")

    @classmethod
    def first(cls, path: Path, size: int) -> FileRecord:
        return cls(paths=[path], size=size)

    def add_path(self, path: Path) -> None:
        self.paths.append(path)

    @property
    def is_duplicate(self) -> bool:
        return len(self.paths) > 1


class SelectionKind(str, Enum):
    """Outcome of parsing one prompt answer."""

    invalid_input = "invalid_input"
    invalid_index = "invalid_index"
    abstain = "abstain"
    keep = "keep"


class Selection(BaseModel):
    """
    Ephemeral user choice for one duplicate set.

    ``invalid_input`` and ``invalid_index`` send the prompt round again;
    ``abstain`` and ``keep`` end it. ``index`` is 0-based and only set for
    ``keep``.
    """

    model_config = ConfigDict(frozen=True)

    kind: SelectionKind
    index: Optional[int] = None

    @classmethod
    def abstain(cls) -> Selection:
        return cls(kind=SelectionKind.abstain)

    @classmethod
    def keep(cls, index: int) -> Selection:
        return cls(kind=SelectionKind.keep, index=index)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (SelectionKind.abstain, SelectionKind.keep)


class ScanConfig(BaseModel):
    """Configuration for a duplicate scan."""

    root_path: Path = Field(description="Root directory to scan")
    progress_interval: int = Field(
        default=100,
        ge=1,
        description="Hashed files between two progress callbacks",
    )


class ScanStats(BaseModel):
    """Real-time scan statistics."""

    files_hashed: int = 0
    bytes_hashed: int = 0
    directories_listed: int = 0
    duplicate_sets: int = 0
    current_directory: str = ""
