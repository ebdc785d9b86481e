"""Well-known directory kinds."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from resourcefs.kernel.context import FileSystemContext
    from resourcefs.services.folder_store import FileSystemFolderStore


class WellKnownDirectory(Enum):
    """Semantic root categories inside the sandboxed file tree."""

    DOCUMENTS = "documents"  # user-visible files
    CACHES = "caches"  # recreatable, not backed up
    APPLICATION_SUPPORT = "application_support"  # internal data, backed up
    TEMPORARY = "temporary"  # scratch space, may vanish at any time

    @property
    def search_path(self) -> Optional[str]:
        """Sandbox-relative search location, or None for ``TEMPORARY``.

        Temporary storage has no search path; a capability resolves it to its
        scratch directory directly.
        """
        return _SEARCH_PATHS.get(self)

    def folder_store(
        self,
        agent: FileSystemContext,
        subfolder: Optional[str] = None,
    ) -> FileSystemFolderStore:
        """Build a folder store rooted at this kind (plus optional subfolder)."""
        from resourcefs.services.folder_store import FileSystemFolderStore

        return FileSystemFolderStore(agent, self, subfolder=subfolder)


_SEARCH_PATHS = {
    WellKnownDirectory.DOCUMENTS: "Documents",
    WellKnownDirectory.CACHES: "Library/Caches",
    WellKnownDirectory.APPLICATION_SUPPORT: "Library/Application Support",
}
