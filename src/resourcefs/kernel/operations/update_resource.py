"""Update - load a resource, modify it, save it back.

There is no conflict detection between the load and the save: a writer that
lands in between is silently overwritten (last writer wins). Callers that
mutate the same resource concurrently must serialize externally.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

import structlog

from resourcefs.domain.errors import (
    LoadResourceError,
    SaveResourceError,
    UpdateLoadFailed,
    UpdateSaveFailed,
    UpdateUnexpected,
)
from resourcefs.domain.location import Directory
from resourcefs.kernel.codec import ResourceCodec
from resourcefs.kernel.context import FileSystemContext
from resourcefs.kernel.operations.load_resource import LoadResource
from resourcefs.kernel.operations.save_resource import SaveResource

logger = structlog.get_logger()

T = TypeVar("T")


class UpdateResource:
    """Loads, modifies and re-saves a persisted resource."""

    def __init__(self, agent: FileSystemContext, codec: Optional[ResourceCodec] = None):
        self._agent = agent
        self._codec = codec

    def update_resource(
        self,
        name: str,
        folder: Directory,
        resource_type: type[T],
        modify: Callable[[T], Optional[T]],
    ) -> T:
        """Apply ``modify`` to the stored resource and save the result.

        ``modify`` mutates the resource in place. If it returns something other
        than None, that value is saved instead (for immutable resources).

        Returns:
            The resource as saved.

        Raises:
            UpdateLoadFailed: loading failed; wraps the ``LoadResourceError``.
            UpdateSaveFailed: saving failed; wraps the ``SaveResourceError``.
            UpdateUnexpected: anything else, e.g. ``modify`` raised.
        """
        loader = LoadResource(self._agent, self._codec)
        saver = SaveResource(self._agent, self._codec)
        try:
            resource = loader.load_resource(name, folder, resource_type)
            replacement = modify(resource)
            if replacement is not None:
                resource = replacement
            saver.save_resource(resource, name, folder)
        except LoadResourceError as e:
            raise UpdateLoadFailed(name, e) from e
        except SaveResourceError as e:
            raise UpdateSaveFailed(name, e) from e
        except Exception as e:
            logger.warning("resource_update_failed", storage_key=name, error=str(e))
            raise UpdateUnexpected(name, e) from e

        logger.debug("resource_updated", storage_key=name)
        return resource
