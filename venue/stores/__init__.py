from venue.stores.bst_store import BinarySearchTreeStore
from venue.stores.interfaces import RecordStore

__all__ = ["RecordStore", "BinarySearchTreeStore"]
