"""Services - folder-scoped resource persistence."""

from .folder_store import FileSystemFolderStore
from .resource_operations import ResourceOperations

__all__ = ["FileSystemFolderStore", "ResourceOperations"]
