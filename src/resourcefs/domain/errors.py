"""Domain errors."""

from __future__ import annotations

from typing import Optional


class ResourceFSError(Exception):
    """Base error."""
    pass


class ConsumedFileError(ResourceFSError):
    """A file handle was used after a move or delete consumed it."""

    def __init__(self, filename: str, operation: str):
        self.filename = filename
        self.operation = operation
        super().__init__(
            f"File handle for '{filename}' was already consumed; cannot {operation}"
        )


class DirectoryResolutionError(ResourceFSError):
    """A well-known directory could not be supplied by the environment."""

    def __init__(self, kind: str, reason: str = ""):
        self.kind = kind
        super().__init__(
            f"Unable to resolve directory '{kind}': {reason}" if reason
            else f"Unable to resolve directory '{kind}'"
        )


class ResourceError(ResourceFSError):
    """Error raised by a resource-level operation.

    Identity is the concrete error class plus ``storage_key``. The wrapped
    ``underlying_error`` is diagnostic only and never takes part in equality.
    """

    def __init__(self, storage_key: str, underlying_error: Optional[BaseException] = None):
        self.storage_key = storage_key
        self.underlying_error = underlying_error
        super().__init__(self.debug_description)

    @property
    def debug_description(self) -> str:
        return f"Resource operation failed for key '{self.storage_key}'."

    @property
    def user_message(self) -> str:
        return "Something went wrong. Please try again."

    def _identity(self) -> tuple:
        return (type(self), self.storage_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceError):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(storage_key={self.storage_key!r})"


# -- Save --


class SaveResourceError(ResourceError):
    """Saving a resource failed."""


class EncodingFailed(SaveResourceError):
    @property
    def debug_description(self) -> str:
        return f"Failed to encode resource with key '{self.storage_key}'."

    @property
    def user_message(self) -> str:
        return "We couldn't save your data. Please try again."


class WriteFailed(SaveResourceError):
    @property
    def debug_description(self) -> str:
        return f"Failed to save file with key '{self.storage_key}': {self.underlying_error}."

    @property
    def user_message(self) -> str:
        return "Saving the file didn't work. Please try again."


# -- Load --


class LoadResourceError(ResourceError):
    """Loading a resource failed."""


class ReadFailed(LoadResourceError):
    @property
    def debug_description(self) -> str:
        return f"Failed to read the file with key '{self.storage_key}': {self.underlying_error}"

    @property
    def user_message(self) -> str:
        return f"Failed to read the file {self.storage_key}."


class EmptyFile(LoadResourceError):
    @property
    def debug_description(self) -> str:
        return f"The file with key '{self.storage_key}' is empty."

    @property
    def user_message(self) -> str:
        return f"The file {self.storage_key} is empty."


class DecodingFailed(LoadResourceError):
    @property
    def debug_description(self) -> str:
        return f"Failed to decode the contents of the file with key '{self.storage_key}'."

    @property
    def user_message(self) -> str:
        return f"Failed to decode the contents of the file {self.storage_key}."


# -- Delete --


class DeleteResourceError(ResourceError):
    """Deleting a resource failed."""


class DeleteFailed(DeleteResourceError):
    @property
    def debug_description(self) -> str:
        return f"Failed to delete the file named '{self.storage_key}': {self.underlying_error}"

    @property
    def user_message(self) -> str:
        return "Something went wrong while removing a file. Please try again."


# -- Update --


class UpdateResourceError(ResourceError):
    """A load-modify-save sequence failed.

    ``underlying_error`` holds the load or save error (or, for
    ``UpdateUnexpected``, whatever else was raised).
    """

    def _identity(self) -> tuple:
        return (type(self), self.storage_key, self.underlying_error)


class UpdateLoadFailed(UpdateResourceError):
    @property
    def debug_description(self) -> str:
        return f"Update failed due to a load error: {self.underlying_error}"

    @property
    def user_message(self) -> str:
        return self.underlying_error.user_message


class UpdateSaveFailed(UpdateResourceError):
    @property
    def debug_description(self) -> str:
        return f"Update failed due to a save error: {self.underlying_error}"

    @property
    def user_message(self) -> str:
        return self.underlying_error.user_message


class UpdateUnexpected(UpdateResourceError):
    @property
    def debug_description(self) -> str:
        return f"Update failed with an unexpected error: {self.underlying_error}"

    @property
    def user_message(self) -> str:
        return "Something went wrong while updating your data. Please try again."

    def _identity(self) -> tuple:
        return (type(self), self.storage_key, str(self.underlying_error))
