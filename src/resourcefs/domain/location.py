"""Location model - directories and the files inside them.

Directories and files are cheap descriptors with no I/O of their own. Every
operation takes the ``FileSystemContext`` that performs the actual work.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from resourcefs.domain.errors import ConsumedFileError
from resourcefs.kernel.context import WriteOptions

if TYPE_CHECKING:
    from resourcefs.kernel.context import FileSystemContext


class Directory:
    """A location in the storage hierarchy that can hold files.

    Subclasses provide ``location``; everything else is expressed in terms of
    the capability's primitives.
    """

    location: PurePath

    def exists(self, context: FileSystemContext) -> bool:
        """Return True if a folder is found at this location."""
        return context.folder_exists(self.location)

    def create_if_necessary(self, context: FileSystemContext) -> None:
        """Create this directory unless it already exists."""
        context.create_directory_if_necessary(self.location)

    def delete_if_exists(self, context: FileSystemContext) -> None:
        """Delete this directory if present. Absence is not an error."""
        context.delete_directory_if_exists(self.location)

    def resource(self, filename: str) -> File:
        """Return a fresh, unconsumed handle for ``filename`` in this directory."""
        return File(filename=filename, enclosing_folder=self)

    def create_resource(
        self,
        filename: str,
        data: bytes,
        context: FileSystemContext,
    ) -> None:
        """Ensure this directory exists, then write ``data`` to ``filename``."""
        self.create_if_necessary(context)
        self.resource(filename).write(data, context)

    def resource_location(self, resource: File) -> PurePath:
        """Where ``resource`` would live inside this directory. No I/O."""
        return self.location / resource.filename


@dataclass(frozen=True)
class Folder(Directory):
    """A concrete directory identified by its path."""

    location: PurePath

    def __post_init__(self) -> None:
        if not isinstance(self.location, PurePath):
            object.__setattr__(self, "location", Path(self.location))


@dataclass(eq=False)
class File:
    """A named, single-use handle to one storage slot inside a directory.

    ``move`` and ``delete`` consume the handle. Any later call on it raises
    ``ConsumedFileError``; build a new handle against the destination instead.
    """

    filename: str
    enclosing_folder: Directory
    _consumed: bool = field(default=False, init=False, repr=False, compare=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return (
            self.filename == other.filename
            and self.enclosing_folder.location == other.enclosing_folder.location
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def location(self) -> PurePath:
        return self.enclosing_folder.location / self.filename

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _check_usable(self, operation: str) -> None:
        if self._consumed:
            raise ConsumedFileError(self.filename, operation)

    def exists(self, context: FileSystemContext) -> bool:
        self._check_usable("check existence")
        return context.file_exists(self.location)

    def read(self, context: FileSystemContext) -> bytes:
        self._check_usable("read")
        return context.read(self.location)

    def write(
        self,
        data: bytes,
        context: FileSystemContext,
        options: WriteOptions = WriteOptions.NONE,
    ) -> None:
        self._check_usable("write")
        context.write(data, self.location, options)

    def copy(self, folder: Directory, context: FileSystemContext) -> None:
        """Copy into ``folder`` under the same name. The handle stays valid."""
        self._check_usable("copy")
        destination = folder.resource_location(self)
        context.copy_resource(self.location, destination)

    def move(self, folder: Directory, context: FileSystemContext) -> None:
        """Move into ``folder`` under the same name. Consumes the handle."""
        self._check_usable("move")
        destination = folder.resource_location(self)
        try:
            context.move_resource(self.location, destination)
        finally:
            self._consumed = True

    def delete(self, context: FileSystemContext) -> None:
        """Delete the file. Consumes the handle."""
        self._check_usable("delete")
        try:
            context.delete_location(self.location)
        finally:
            self._consumed = True
