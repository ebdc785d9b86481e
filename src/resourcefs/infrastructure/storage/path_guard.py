"""Path guardrails for the sandboxed file tree."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePath, PurePosixPath


# Components that would escape the directory they are joined onto.
DANGEROUS_PATTERNS = [
    re.compile(r"^\.\.$"),  # parent directory
    re.compile(r"^[A-Za-z]:"),  # Windows drive letter
    re.compile(r"^~"),  # home expansion
    re.compile(r"[%$]"),  # environment variable expansion
]


class InvalidArtifactPathError(ValueError):
    """Raised when a path escapes the configured sandbox root."""


class PathIsolationError(InvalidArtifactPathError):
    """A location or subpath lies outside the area it is confined to."""


def normalize_path(path: str | Path) -> Path:
    raw = str(path or "").strip()
    if not raw:
        raise InvalidArtifactPathError("path is required")
    expanded = os.path.expandvars(os.path.expanduser(raw))
    return Path(expanded).resolve(strict=False)


def ensure_within_root(root: str | Path, path: str | Path) -> Path:
    """Ensure `path` is under `root` (inclusive)."""
    root_path = normalize_path(root)
    candidate = normalize_path(path)

    try:
        common = os.path.commonpath([str(root_path), str(candidate)])
    except ValueError as exc:
        raise InvalidArtifactPathError(str(exc)) from exc

    if common != str(root_path):
        raise InvalidArtifactPathError(f"path escapes root: {candidate}")
    return candidate


def safe_join(root: str | Path, *parts: str) -> Path:
    base = normalize_path(root)
    candidate = (base.joinpath(*parts)).resolve(strict=False)
    return ensure_within_root(base, candidate)


def split_subpath(subpath: str) -> list[str]:
    """Split a ``/``-separated subpath into validated components.

    Empty and ``.`` components are dropped. Absolute paths and components
    that could escape (``..``, drive letters, ``~``, ``$VAR``) are rejected.
    """
    normalized = str(subpath).replace("\\", "/")
    if normalized.startswith("/"):
        raise PathIsolationError(f"subpath must be relative: {subpath!r}")

    parts: list[str] = []
    for part in normalized.split("/"):
        if part in ("", "."):
            continue
        for pattern in DANGEROUS_PATTERNS:
            if pattern.search(part):
                raise PathIsolationError(
                    f"subpath component {part!r} not allowed in {subpath!r}"
                )
        parts.append(part)
    return parts


def join_subpath(base: PurePath, subpath: str) -> PurePath:
    """Append a validated nested subpath to ``base``. Pure, no I/O."""
    if not isinstance(base, PurePath):
        base = PurePosixPath(base)
    return base.joinpath(*split_subpath(subpath))


def guard_location(root: Path, location: str | PurePath, *, follow_symlinks: bool = True) -> Path:
    """Check a capability location against an already normalized ``root``.

    The location is taken literally: no ``~`` or ``$VAR`` expansion, so a file
    named ``$HOME`` stays ``$HOME``. With ``follow_symlinks=False`` only the
    parent is resolved and the final component is kept as is, so a link is
    addressed itself rather than its target.
    """
    raw = Path(location)
    if not raw.is_absolute():
        raise PathIsolationError(f"location must be absolute: {location}")
    raw = Path(os.path.normpath(raw))
    if follow_symlinks or raw == raw.parent:
        candidate = raw.resolve(strict=False)
    else:
        candidate = raw.parent.resolve(strict=False) / raw.name

    try:
        common = os.path.commonpath([str(root), str(candidate)])
    except ValueError as exc:
        raise PathIsolationError(str(exc)) from exc
    if common != str(root):
        raise PathIsolationError(f"location {location} is outside sandbox {root}")
    return candidate
