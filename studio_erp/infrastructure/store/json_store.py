from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from studio_erp.application.exceptions import DecodeError
from studio_erp.application.ports.key_value_store import KeyValueStorePort


class JsonKeyValueStore(KeyValueStorePort):
    """Durable key-value store keeping one JSON file per namespaced key."""

    def __init__(self, data_dir: str = "./data/store", namespace: str = "studioERP_") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._namespace = namespace
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _get_file_path(self, key: str) -> Path:
        """Get the file path for a key, prefixed with the namespace."""
        return self._data_dir / f"{self._namespace}{key}.json"

    def get(self, key: str) -> Any | None:
        file_path = self._get_file_path(key)
        with self._lock:
            if not file_path.exists():
                return None
            raw = file_path.read_text(encoding="utf-8")

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            self._logger.error("Stored payload is not valid JSON", extra={"key": key, "error": str(e)})
            raise DecodeError(key, str(e)) from e

    def set(self, key: str, value: Any) -> None:
        """Save value to its JSON file atomically."""
        file_path = self._get_file_path(key)
        temp_path = file_path.with_suffix(".json.tmp")
        payload = json.dumps(value, indent=2, ensure_ascii=False)

        with self._lock:
            try:
                temp_path.write_text(payload, encoding="utf-8")
                # Atomic rename
                temp_path.replace(file_path)
            except OSError:
                if temp_path.exists():
                    temp_path.unlink()
                raise

    def remove(self, key: str) -> None:
        with self._lock:
            self._get_file_path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        prefix = self._namespace
        return sorted(
            path.stem[len(prefix):]
            for path in self._data_dir.glob(f"{prefix}*.json")
        )
