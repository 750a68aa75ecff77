"""
dupfinder - canonical exception hierarchy.

Scan errors are fatal and abort the run. Prompt input errors and
per-file deletion errors are not exceptions: the resolver reports them
inline and carries on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class DupFinderError(Exception):
    """Base exception for dupfinder."""


class ScanError(DupFinderError):
    """Fatal scan failure (directory listing or file read)."""

    def __init__(self, path: Union[str, Path], reason: str, error: Optional[OSError] = None):
        self.path = Path(path)
        self.reason = reason
        self.error = error
        super().__init__(f"{reason} {str(self.path)!r}: {self._describe(error)}")

    @staticmethod
    def _describe(error: Optional[OSError]) -> str:
        if error is None:
            return "unknown error"
        if error.strerror:
            return f"{error.strerror} (os error {error.errno})"
        return str(error)


class TraversalError(ScanError):
    """Directory could not be listed."""

    def __init__(self, path: Union[str, Path], error: Optional[OSError] = None):
        super().__init__(path, "cannot list directory", error)


class FileReadError(ScanError):
    """File could not be read for hashing."""

    def __init__(self, path: Union[str, Path], error: Optional[OSError] = None):
        super().__init__(path, "cannot read file", error)
