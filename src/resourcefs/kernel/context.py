"""File system capability - the primitives the core needs from its environment.

Implementations wrap a real storage medium (local disk, memory, network).
Every primitive is synchronous and location-scoped; none is idempotent. The
two ``*_if_*`` helpers layer idempotence on top of the required primitives.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Flag, auto
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resourcefs.domain.directories import WellKnownDirectory


class WriteOptions(Flag):
    """Write behaviour forwarded verbatim to ``FileSystemContext.write``."""

    NONE = 0
    ATOMIC = auto()  # write to a temporary file, then replace
    WITHOUT_OVERWRITING = auto()  # fail if the file already exists


class FileSystemContext(ABC):
    """Interface for interacting with files (resources) and folders (directories)."""

    @abstractmethod
    def file_exists(self, location: PurePath) -> bool:
        """Return True if a file is found at ``location``."""

    @abstractmethod
    def folder_exists(self, location: PurePath) -> bool:
        """Return True if a folder is found at ``location``."""

    @abstractmethod
    def move_resource(self, source: PurePath, destination: PurePath) -> None:
        """Move a file from ``source`` to ``destination``."""

    @abstractmethod
    def copy_resource(self, source: PurePath, destination: PurePath) -> None:
        """Copy a file from ``source`` to ``destination``."""

    @abstractmethod
    def delete_location(self, location: PurePath) -> None:
        """Delete the file or directory at ``location``.

        Raises if nothing exists there or it cannot be removed.
        """

    @abstractmethod
    def create_directory(self, location: PurePath) -> None:
        """Create a folder at ``location``."""

    @abstractmethod
    def write(self, data: bytes, location: PurePath, options: WriteOptions) -> None:
        """Write ``data`` to ``location``, overwriting unless ``options`` say otherwise."""

    @abstractmethod
    def read(self, location: PurePath) -> bytes:
        """Return the contents of the file at ``location``.

        Raises if the file does not exist or cannot be read.
        """

    @abstractmethod
    def location_for(self, directory: WellKnownDirectory) -> PurePath:
        """Resolve a well-known directory kind to a concrete location.

        Raises if the environment denies or cannot supply the location.
        """

    def create_directory_if_necessary(self, location: PurePath) -> None:
        """Create the folder at ``location`` only when it is absent."""
        if not self.folder_exists(location):
            self.create_directory(location)

    def delete_directory_if_exists(self, location: PurePath) -> None:
        """Delete the folder at ``location`` only when it is present."""
        if self.folder_exists(location):
            self.delete_location(location)
