"""Resource-level transactions: save, load, update, delete."""

from .delete_resource import DeleteResource
from .load_resource import LoadResource
from .save_resource import SaveResource
from .update_resource import UpdateResource

__all__ = ["DeleteResource", "LoadResource", "SaveResource", "UpdateResource"]
