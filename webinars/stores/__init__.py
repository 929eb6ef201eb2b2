from webinars.stores.interfaces import WebinarStore
from webinars.stores.memory_store import InMemoryWebinarStore

__all__ = ["WebinarStore", "InMemoryWebinarStore"]
