"""Delete - remove a persisted resource from a directory."""

from __future__ import annotations

import structlog

from resourcefs.domain.errors import DeleteFailed
from resourcefs.domain.location import Directory
from resourcefs.kernel.context import FileSystemContext

logger = structlog.get_logger()


class DeleteResource:
    """Deletes files within a folder using the given capability."""

    def __init__(self, agent: FileSystemContext):
        self._agent = agent

    def delete_resource(self, name: str, folder: Directory) -> None:
        """Delete ``name`` from ``folder``.

        Raises:
            DeleteFailed: the file could not be deleted (including when absent).
        """
        resource = folder.resource(name)
        try:
            resource.delete(self._agent)
        except Exception as e:
            logger.warning("resource_delete_failed", storage_key=name, error=str(e))
            raise DeleteFailed(name, e) from e
        logger.debug("resource_deleted", storage_key=name)
