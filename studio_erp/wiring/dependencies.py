import logging

from studio_erp.application.ports.key_value_store import KeyValueStorePort
from studio_erp.application.repositories.studio import StudioRepository
from studio_erp.application.use_cases.view_sync import ViewSynchronizer
from studio_erp.core.config import settings
from studio_erp.infrastructure.rendering.memory_document import MemoryDocument
from studio_erp.infrastructure.store.json_store import JsonKeyValueStore
from studio_erp.infrastructure.store.memory_store import MemoryKeyValueStore


_store: KeyValueStorePort | None = None
_view_synchronizer: ViewSynchronizer | None = None


def get_store() -> KeyValueStorePort:
    global _store
    if _store is None:
        logger = logging.getLogger(__name__)
        if settings.STORE_PROVIDER.lower() == "memory":
            logger.info("Using MemoryKeyValueStore")
            _store = MemoryKeyValueStore(namespace=settings.STORE_NAMESPACE)
        else:
            logger.info("Using JsonKeyValueStore", extra={"key": settings.STORE_DATA_DIR})
            _store = JsonKeyValueStore(data_dir=settings.STORE_DATA_DIR, namespace=settings.STORE_NAMESPACE)
    return _store


def get_repository() -> StudioRepository:
    return StudioRepository(get_store())


def get_view_synchronizer() -> ViewSynchronizer:
    global _view_synchronizer
    if _view_synchronizer is None:
        _view_synchronizer = ViewSynchronizer(
            repository=get_repository(),
            renderer=MemoryDocument(),
            currency_symbol=settings.CURRENCY_SYMBOL,
            recent_visit_days=settings.RECENT_VISIT_DAYS,
        )
    return _view_synchronizer

