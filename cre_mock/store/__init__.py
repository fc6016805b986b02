"""In-memory data stores for CRE entities."""

from cre_mock.store.cre import CreDataStore, Generation
from cre_mock.store.handle import StoreHandle

__all__ = ["CreDataStore", "Generation", "StoreHandle"]
