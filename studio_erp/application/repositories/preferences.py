from __future__ import annotations

import logging

from studio_erp.application.ports.key_value_store import KeyValueStorePort

DARK_MODE_KEY = "darkMode"


class PreferencesRepository:
    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def dark_mode(self) -> bool:
        return self._store.get(DARK_MODE_KEY) is True

    def set_dark_mode(self, enabled: bool) -> None:
        self._store.set(DARK_MODE_KEY, bool(enabled))
        self._logger.info("Dark mode preference saved", extra={"key": DARK_MODE_KEY})
