"""
dupfinder - find and resolve files with identical content.

Modules:
- walker: Recursive regular-file enumeration (explicit stack)
- hasher: Whole-file SHA256 digest + size
- index: Digest -> FileRecord mapping
- scanner: Walk + hash + group into a DuplicateIndex
- reporter: Console report of duplicate sets
- resolver: Interactive "which copy to keep" prompt
- deleter: Deletion of the unselected copies
- models: Pydantic data models
"""

__version__ = "0.1.0"

from dupfinder.index import DuplicateIndex
from dupfinder.models import (
    Digest,
    FileRecord,
    ScanConfig,
    ScanStats,
    Selection,
    SelectionKind,
)
from dupfinder.scanner import DuplicateScanner, scan_directory

__all__ = [
    "Digest",
    "DuplicateIndex",
    "DuplicateScanner",
    "FileRecord",
    "ScanConfig",
    "ScanStats",
    "Selection",
    "SelectionKind",
    "scan_directory",
]
