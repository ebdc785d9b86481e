"""Folder store - a capability bound to one resolved root folder."""

from __future__ import annotations

from typing import Optional

import structlog

from resourcefs.domain.directories import WellKnownDirectory
from resourcefs.domain.location import Folder
from resourcefs.infrastructure.storage.path_guard import join_subpath
from resourcefs.kernel.codec import ResourceCodec
from resourcefs.kernel.context import FileSystemContext
from resourcefs.services.resource_operations import ResourceOperations

logger = structlog.get_logger()


class FileSystemFolderStore(ResourceOperations):
    """Saves, loads, updates and deletes resources inside one folder.

    The folder is resolved from a well-known directory kind (plus an optional
    nested ``subfolder`` such as ``"a/b/c"``) and created eagerly, so it
    exists as soon as the store does.

    Usage:
        store = FileSystemFolderStore(agent, WellKnownDirectory.CACHES, subfolder="images")
        store.save_resource({"width": 640}, "meta.json")
        meta = store.load_resource("meta.json", dict)
    """

    def __init__(
        self,
        agent: FileSystemContext,
        kind: WellKnownDirectory,
        subfolder: Optional[str] = None,
        codec: Optional[ResourceCodec] = None,
    ):
        base = agent.location_for(kind)
        location = join_subpath(base, subfolder) if subfolder else base
        folder = Folder(location)
        folder.create_if_necessary(agent)

        self.agent = agent
        self.folder = folder
        self.kind = kind
        self.codec = codec
        logger.debug("folder_store_ready", kind=kind.value, location=str(location))

    @classmethod
    def from_folder(
        cls,
        agent: FileSystemContext,
        folder: Folder,
        kind: WellKnownDirectory,
        codec: Optional[ResourceCodec] = None,
    ) -> "FileSystemFolderStore":
        """Bind an already resolved folder. Performs no I/O."""
        store = cls.__new__(cls)
        store.agent = agent
        store.folder = folder
        store.kind = kind
        store.codec = codec
        return store

    def __repr__(self) -> str:
        return f"FileSystemFolderStore(kind={self.kind.value!r}, folder={self.folder.location})"
