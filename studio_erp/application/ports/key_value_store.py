from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorePort(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Return the decoded value stored under key, or None if it was never set.
        Raises DecodeError if a payload exists but cannot be decoded.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Encode and durably store value under key."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> list[str]:
        """Keys stored under this store's namespace, without the prefix."""
        raise NotImplementedError
