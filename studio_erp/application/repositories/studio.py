from __future__ import annotations

from studio_erp.application.ports.key_value_store import KeyValueStorePort
from studio_erp.application.repositories.clients import ClientRepository
from studio_erp.application.repositories.inventory import InventoryRepository
from studio_erp.application.repositories.preferences import PreferencesRepository
from studio_erp.application.repositories.services import ServiceRepository
from studio_erp.application.utils.id_generator import IdGenerator


class StudioRepository:
    """Single write path to the key-value store for every collection and preference."""

    def __init__(self, store: KeyValueStorePort, id_generator: IdGenerator | None = None) -> None:
        ids = id_generator or IdGenerator()
        self.services = ServiceRepository(store, ids)
        self.clients = ClientRepository(store, ids)
        self.inventory = InventoryRepository(store, ids)
        self.preferences = PreferencesRepository(store)
