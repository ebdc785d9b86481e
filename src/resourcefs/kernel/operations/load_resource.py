"""Load - read raw bytes or a decoded resource from a directory."""

from __future__ import annotations

from typing import Optional, TypeVar

import structlog

from resourcefs.domain.errors import DecodingFailed, EmptyFile, ReadFailed
from resourcefs.domain.location import Directory
from resourcefs.kernel.codec import JsonResourceCodec, ResourceCodec
from resourcefs.kernel.context import FileSystemContext

logger = structlog.get_logger()

T = TypeVar("T")


class LoadResource:
    """Reads raw data or decodes typed resources from a folder.

    A zero-length file is an error (``EmptyFile``), never valid empty content.
    """

    def __init__(self, agent: FileSystemContext, codec: Optional[ResourceCodec] = None):
        self._agent = agent
        self._codec = codec or JsonResourceCodec()

    def load_resource(self, name: str, folder: Directory, resource_type: type[T]) -> T:
        """Load ``name`` from ``folder`` and decode it as ``resource_type``.

        Raises:
            ReadFailed: the file is missing or unreadable.
            EmptyFile: the file holds zero bytes.
            DecodingFailed: the bytes do not decode into ``resource_type``.
        """
        data = self.load_data(name, folder)
        try:
            return self._codec.decode(data, resource_type)
        except ValueError as e:
            logger.warning("resource_decoding_failed", storage_key=name, error=str(e))
            raise DecodingFailed(name, e) from e

    def load_data(self, name: str, folder: Directory) -> bytes:
        """Return the raw contents of ``name`` inside ``folder``.

        Raises:
            ReadFailed: the file is missing or unreadable.
            EmptyFile: the file holds zero bytes.
        """
        resource = folder.resource(name)
        try:
            data = resource.read(self._agent)
        except Exception as e:
            logger.warning("resource_read_failed", storage_key=name, error=str(e))
            raise ReadFailed(name, e) from e

        if not data:
            logger.warning("resource_empty", storage_key=name)
            raise EmptyFile(name)

        logger.debug("resource_loaded", storage_key=name, size=len(data))
        return data
