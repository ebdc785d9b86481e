"""Domain models for resourcefs."""

from .directories import WellKnownDirectory
from .errors import (
    ConsumedFileError,
    DecodingFailed,
    DeleteFailed,
    DeleteResourceError,
    DirectoryResolutionError,
    EmptyFile,
    EncodingFailed,
    LoadResourceError,
    ReadFailed,
    ResourceError,
    ResourceFSError,
    SaveResourceError,
    UpdateLoadFailed,
    UpdateResourceError,
    UpdateSaveFailed,
    UpdateUnexpected,
    WriteFailed,
)
from .location import Directory, File, Folder

__all__ = [
    "WellKnownDirectory",
    "Directory",
    "File",
    "Folder",
    # Errors
    "ResourceFSError",
    "ResourceError",
    "ConsumedFileError",
    "DirectoryResolutionError",
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
