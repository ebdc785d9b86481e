"""Local disk capability - a sandboxed ``FileSystemContext`` over the OS file system.

Every location is checked against the sandbox root before any I/O. Well-known
directories live inside the sandbox:

    <sandbox_root>/Documents
    <sandbox_root>/Library/Caches
    <sandbox_root>/Library/Application Support
    <scratch root>                      (temporary; <sandbox_root>/tmp by default)
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path, PurePath
from typing import Optional

import structlog

from resourcefs.config import settings
from resourcefs.domain.directories import WellKnownDirectory
from resourcefs.domain.errors import DirectoryResolutionError
from resourcefs.infrastructure.storage.io_bytes import (
    write_bytes,
    write_bytes_atomic,
    write_bytes_exclusive,
)
from resourcefs.infrastructure.storage.path_guard import (
    InvalidArtifactPathError,
    PathIsolationError,
    ensure_within_root,
    guard_location,
    normalize_path,
    safe_join,
)
from resourcefs.kernel.context import FileSystemContext, WriteOptions

logger = structlog.get_logger()


class LocalFileSystem(FileSystemContext):
    """Real disk access confined to one sandbox directory.

    Primitives are thin: ``create_directory`` fails if the folder
    exists, ``delete_location`` fails if nothing is there. Idempotence is
    layered on top by ``FileSystemContext`` and the location model.
    """

    def __init__(
        self,
        sandbox_root: Optional[str | Path] = None,
        temporary_root: Optional[str | Path] = None,
        *,
        fsync: Optional[bool] = None,
    ):
        if sandbox_root is None:
            self._root = settings.sandbox_root
            if temporary_root is None:
                temporary_root = settings.scratch_root
        else:
            self._root = normalize_path(sandbox_root)
            if temporary_root is None:
                temporary_root = self._root / "tmp"
        try:
            self._scratch = ensure_within_root(self._root, temporary_root)
        except InvalidArtifactPathError as e:
            raise PathIsolationError(
                f"temporary root {temporary_root} is outside sandbox {self._root}"
            ) from e
        self._fsync = settings.io_fsync if fsync is None else fsync

    @property
    def sandbox_root(self) -> Path:
        return self._root

    def _guard(self, location: PurePath, *, follow_symlinks: bool = True) -> Path:
        return guard_location(self._root, location, follow_symlinks=follow_symlinks)

    # -- Existence --

    def file_exists(self, location: PurePath) -> bool:
        return self._guard(location).is_file()

    def folder_exists(self, location: PurePath) -> bool:
        return self._guard(location).is_dir()

    # -- Mutations --

    def create_directory(self, location: PurePath) -> None:
        path = self._guard(location)
        path.mkdir(parents=True, exist_ok=False)
        logger.debug("directory_created", location=str(path))

    def delete_location(self, location: PurePath) -> None:
        path = self._guard(location, follow_symlinks=False)
        if path == self._root:
            raise PathIsolationError("refusing to delete the sandbox root")
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
        logger.debug("location_deleted", location=str(path))

    def move_resource(self, source: PurePath, destination: PurePath) -> None:
        src = self._guard(source, follow_symlinks=False)
        dst = self._guard(destination)
        if not os.path.lexists(src):
            raise FileNotFoundError(f"No such file: {src}")
        shutil.move(str(src), str(dst))
        logger.debug("resource_moved", source=str(src), destination=str(dst))

    def copy_resource(self, source: PurePath, destination: PurePath) -> None:
        src = self._guard(source)
        dst = self._guard(destination)
        if src.is_dir():
            shutil.copytree(src, dst)
        else:
            shutil.copy2(src, dst)
        logger.debug("resource_copied", source=str(src), destination=str(dst))

    def write(self, data: bytes, location: PurePath, options: WriteOptions) -> None:
        path = self._guard(location)
        if WriteOptions.WITHOUT_OVERWRITING in options:
            write_bytes_exclusive(path, data)
        elif WriteOptions.ATOMIC in options:
            write_bytes_atomic(path, data, fsync=self._fsync)
        else:
            write_bytes(path, data)

    def read(self, location: PurePath) -> bytes:
        return self._guard(location).read_bytes()

    # -- Well-known directories --

    def location_for(self, directory: WellKnownDirectory) -> Path:
        search_path = directory.search_path
        if search_path is None:
            return self._scratch
        try:
            return safe_join(self._root, *search_path.split("/"))
        except InvalidArtifactPathError as e:
            raise DirectoryResolutionError(directory.value, str(e)) from e

    def __repr__(self) -> str:
        return f"LocalFileSystem(sandbox_root={self._root})"
