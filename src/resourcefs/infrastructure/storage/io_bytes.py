"""Byte-level file writes for the local capability."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_bytes_atomic(path: Path, data: bytes, *, fsync: bool = True) -> None:
    """Write bytes atomically using a temp file in the same folder and replace."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            if fsync:
                os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def write_bytes_exclusive(path: Path, data: bytes) -> None:
    """Write bytes to a new file. Raises ``FileExistsError`` if it exists."""
    with open(path, "xb") as handle:
        handle.write(data)


def write_bytes(path: Path, data: bytes) -> None:
    with open(path, "wb") as handle:
        handle.write(data)
