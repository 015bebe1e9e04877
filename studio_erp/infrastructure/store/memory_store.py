from __future__ import annotations

import json
from typing import Any

from studio_erp.application.exceptions import DecodeError
from studio_erp.application.ports.key_value_store import KeyValueStorePort


class MemoryKeyValueStore(KeyValueStorePort):
    """Keeps encoded text per key so reads decode exactly like the durable store."""

    def __init__(self, namespace: str = "studioERP_", initial: dict[str, str] | None = None) -> None:
        self._namespace = namespace
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        raw = self._data.get(self._namespace + key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise DecodeError(key, str(e)) from e

    def set(self, key: str, value: Any) -> None:
        self._data[self._namespace + key] = json.dumps(value, ensure_ascii=False)

    def remove(self, key: str) -> None:
        self._data.pop(self._namespace + key, None)

    def keys(self) -> list[str]:
        n = len(self._namespace)
        return sorted(k[n:] for k in self._data if k.startswith(self._namespace))

    def raw(self) -> dict[str, str]:
        """Namespaced keys and their encoded payloads."""
        return dict(self._data)
