"""Resource operations facade.

``ResourceOperations`` binds an ``agent`` (capability) and a ``folder`` and
forwards every call to the operation utilities. It holds no state of its own.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from resourcefs.domain.location import Directory, File
from resourcefs.kernel.codec import ResourceCodec
from resourcefs.kernel.context import FileSystemContext
from resourcefs.kernel.operations import (
    DeleteResource,
    LoadResource,
    SaveResource,
    UpdateResource,
)

T = TypeVar("T")


class ResourceOperations:
    """Typed and raw persistence for one folder.

    Subclasses provide ``agent`` and ``folder`` (attributes or properties) and
    may set ``codec`` to replace the default JSON codec.
    """

    agent: FileSystemContext
    folder: Directory
    codec: Optional[ResourceCodec] = None

    @property
    def folder_exists(self) -> bool:
        """Whether the folder exists on disk."""
        return self.folder.exists(self.agent)

    def save_resource(self, resource: Any, filename: str) -> None:
        """Encode ``resource`` and save it as ``filename``."""
        self.agent.create_directory_if_necessary(self.folder.location)
        saver = SaveResource(self.agent, self.codec)
        saver.save_resource(resource, filename, self.folder)

    def load_resource(self, filename: str, resource_type: type[T]) -> T:
        """Load ``filename`` and decode it as ``resource_type``."""
        loader = LoadResource(self.agent, self.codec)
        return loader.load_resource(filename, self.folder, resource_type)

    def delete_resource(self, filename: str) -> None:
        deleter = DeleteResource(self.agent)
        deleter.delete_resource(filename, self.folder)

    def update_resource(
        self,
        filename: str,
        resource_type: type[T],
        modify: Callable[[T], Optional[T]],
    ) -> T:
        """Load ``filename``, apply ``modify``, save the result back."""
        updater = UpdateResource(self.agent, self.codec)
        return updater.update_resource(filename, self.folder, resource_type, modify)

    def save_data(self, data: bytes, name: str) -> None:
        """Save raw bytes as ``name``."""
        self.agent.create_directory_if_necessary(self.folder.location)
        saver = SaveResource(self.agent, self.codec)
        saver.save_data(data, name, self.folder)

    def load_data(self, name: str) -> bytes:
        """Load the raw bytes stored as ``name``."""
        loader = LoadResource(self.agent, self.codec)
        return loader.load_data(name, self.folder)

    def load_file(self, filename: str) -> File:
        """Return an unconsumed handle to ``filename`` for direct file operations."""
        return self.folder.resource(filename)

    def resource(self, filename: str) -> File:
        return self.load_file(filename)
