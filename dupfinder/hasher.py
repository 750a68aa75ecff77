"""
Whole-file SHA256 hashing.

The file is read in one go; a failed read never yields a partial digest.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union

from dupfinder.exceptions import FileReadError
from dupfinder.models import Digest


def hash_file(path: Union[str, Path]) -> tuple[Digest, int]:
    """
    Compute the SHA256 digest and byte length of a file.

    Args:
        path: File to hash

    Returns:
        (digest, size_bytes)

    Raises:
        FileReadError: File cannot be opened or fully read
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileReadError(file_path, e) from e

    return Digest(value=hashlib.sha256(data).digest()), len(data)
