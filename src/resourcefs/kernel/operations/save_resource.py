"""Save - encode a resource (or take raw bytes) and write it into a directory."""

from __future__ import annotations

from typing import Any, Optional

import structlog

from resourcefs.domain.errors import EncodingFailed, WriteFailed
from resourcefs.domain.location import Directory
from resourcefs.kernel.codec import JsonResourceCodec, ResourceCodec
from resourcefs.kernel.context import FileSystemContext

logger = structlog.get_logger()


class SaveResource:
    """Encodes and saves resources to the file system.

    The target directory is created if it is absent; an existing file with the
    same name is overwritten.
    """

    def __init__(self, agent: FileSystemContext, codec: Optional[ResourceCodec] = None):
        self._agent = agent
        self._codec = codec or JsonResourceCodec()

    def save_resource(self, resource: Any, name: str, folder: Directory) -> None:
        """Encode ``resource`` and write it to ``name`` inside ``folder``.

        Raises:
            EncodingFailed: the resource could not be encoded; nothing was written.
            WriteFailed: the directory or file could not be written.
        """
        data = self._create_data(resource, name)
        self.save_data(data, name, folder)

    def save_data(self, data: bytes, name: str, folder: Directory) -> None:
        """Write raw ``data`` to ``name`` inside ``folder``.

        Raises:
            WriteFailed: the directory or file could not be written.
        """
        try:
            folder.create_resource(name, data, self._agent)
        except Exception as e:
            logger.warning("resource_save_failed", storage_key=name, error=str(e))
            raise WriteFailed(name, e) from e
        logger.debug(
            "resource_saved",
            storage_key=name,
            location=str(folder.location),
            size=len(data),
        )

    def _create_data(self, resource: Any, key: str) -> bytes:
        try:
            return self._codec.encode(resource)
        except (TypeError, ValueError) as e:
            logger.warning("resource_encoding_failed", storage_key=key, error=str(e))
            raise EncodingFailed(key, e) from e
