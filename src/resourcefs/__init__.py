"""resourcefs - typed resource persistence over a sandboxed file tree.

- Directories and files are location descriptors; a pluggable
  ``FileSystemContext`` performs the actual I/O
- Save / Load / Update / Delete turn low-level failures into typed errors
- A folder store binds a capability to one well-known root (plus subfolder)
"""

from resourcefs.domain import (
    ConsumedFileError,
    DecodingFailed,
    DeleteFailed,
    DeleteResourceError,
    Directory,
    DirectoryResolutionError,
    EmptyFile,
    EncodingFailed,
    File,
    Folder,
    LoadResourceError,
    ReadFailed,
    ResourceError,
    ResourceFSError,
    SaveResourceError,
    UpdateLoadFailed,
    UpdateResourceError,
    UpdateSaveFailed,
    UpdateUnexpected,
    WellKnownDirectory,
    WriteFailed,
)
from resourcefs.infrastructure.storage.local_agent import LocalFileSystem
from resourcefs.infrastructure.storage.path_guard import PathIsolationError
from resourcefs.kernel import FileSystemContext, JsonResourceCodec, ResourceCodec, WriteOptions
from resourcefs.kernel.operations import (
    DeleteResource,
    LoadResource,
    SaveResource,
    UpdateResource,
)
from resourcefs.services import FileSystemFolderStore, ResourceOperations

__version__ = "0.1.0"

__all__ = [
    # Location model
    "Directory",
    "File",
    "Folder",
    "WellKnownDirectory",
    # Capability
    "FileSystemContext",
    "WriteOptions",
    "LocalFileSystem",
    # Codec
    "ResourceCodec",
    "JsonResourceCodec",
    # Operations
    "SaveResource",
    "LoadResource",
    "UpdateResource",
    "DeleteResource",
    "ResourceOperations",
    "FileSystemFolderStore",
    # Errors
    "ResourceFSError",
    "ResourceError",
    "ConsumedFileError",
    "DirectoryResolutionError",
    "PathIsolationError",
    "SaveResourceError",
    "EncodingFailed",
    "WriteFailed",
    "LoadResourceError",
    "ReadFailed",
    "EmptyFile",
    "DecodingFailed",
    "DeleteResourceError",
    "DeleteFailed",
    "UpdateResourceError",
    "UpdateLoadFailed",
    "UpdateSaveFailed",
    "UpdateUnexpected",
]
