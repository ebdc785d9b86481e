"""Storage infrastructure for resourcefs.

Provides sandbox path rules, byte-level writes and the local disk capability.
"""

from .path_guard import (
    InvalidArtifactPathError,
    PathIsolationError,
    ensure_within_root,
    join_subpath,
    normalize_path,
    safe_join,
    split_subpath,
)
from .io_bytes import (
    write_bytes,
    write_bytes_atomic,
    write_bytes_exclusive,
)

__all__ = [
    # Path guard
    "InvalidArtifactPathError",
    "PathIsolationError",
    "ensure_within_root",
    "join_subpath",
    "normalize_path",
    "safe_join",
    "split_subpath",
    # Byte I/O
    "write_bytes",
    "write_bytes_atomic",
    "write_bytes_exclusive",
]
