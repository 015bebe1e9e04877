from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from studio_erp.application.exceptions import DecodeError, NotFoundError, ValidationError
from studio_erp.application.ports.key_value_store import KeyValueStorePort
from studio_erp.application.utils.id_generator import IdGenerator

E = TypeVar("E")
I = TypeVar("I")


class CollectionRepository(ABC, Generic[E, I]):
    """
    One persisted, ordered collection stored as a single list under `key`.

    Every operation re-reads the whole collection from the store and every
    mutation rewrites it, so no caller ever holds a stale copy.
    """

    key: str = ""

    def __init__(self, store: KeyValueStorePort, id_generator: IdGenerator) -> None:
        self._store = store
        self._ids = id_generator
        self._logger = logging.getLogger(__name__)

    @abstractmethod
    def _defaults(self) -> list[E]:
        raise NotImplementedError

    @abstractmethod
    def _to_record(self, entity: E) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def _from_record(self, record: dict[str, Any]) -> E:
        raise NotImplementedError

    @abstractmethod
    def _build(self, entity_id: int, data: I) -> E:
        """New entity from a partial input, applying creation defaults."""
        raise NotImplementedError

    @abstractmethod
    def _replace(self, existing: E, data: I) -> E:
        """Replacement entity: supplied fields from data, the rest carried over from existing."""
        raise NotImplementedError

    @abstractmethod
    def _validate(self, entity: E) -> dict[str, str]:
        raise NotImplementedError

    def _load(self) -> list[E]:
        payload = self._store.get(self.key)
        if payload is None:
            entities = list(self._defaults())
            self._save(entities)
            self._logger.info("Seeded default records", extra={"collection": self.key})
            return entities

        if not isinstance(payload, list):
            raise DecodeError(self.key, f"expected a list, got {type(payload).__name__}")
        try:
            return [self._from_record(record) for record in payload]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(self.key, f"malformed record: {e}") from e

    def _save(self, entities: list[E]) -> None:
        self._store.set(self.key, [self._to_record(entity) for entity in entities])

    def _check(self, entity: E) -> None:
        errors = self._validate(entity)
        if errors:
            raise ValidationError(errors)

    def all(self) -> list[E]:
        return self._load()

    def find_by_id(self, entity_id: int) -> E | None:
        for entity in self._load():
            if entity.id == entity_id:  # type: ignore[attr-defined]
                return entity
        return None

    def create(self, data: I) -> E:
        entities = self._load()
        entity_id = self._ids.next_id(e.id for e in entities)  # type: ignore[attr-defined]
        entity = self._build(entity_id, data)
        self._check(entity)

        entities.append(entity)
        self._save(entities)
        self._logger.info("Record created", extra={"collection": self.key, "entity_id": entity_id})
        return entity

    def update(self, entity_id: int, data: I) -> E:
        entities = self._load()
        index = self._index_of(entities, entity_id)
        entity = self._replace(entities[index], data)
        self._check(entity)

        entities[index] = entity
        self._save(entities)
        self._logger.info("Record updated", extra={"collection": self.key, "entity_id": entity_id})
        return entity

    def delete(self, entity_id: int) -> bool:
        """Remove the record. Returns False, leaving the collection untouched, if the id is unknown."""
        entities = self._load()
        remaining = [e for e in entities if e.id != entity_id]  # type: ignore[attr-defined]
        if len(remaining) == len(entities):
            self._logger.info("Delete of unknown record ignored", extra={"collection": self.key, "entity_id": entity_id})
            return False

        self._save(remaining)
        self._logger.info("Record deleted", extra={"collection": self.key, "entity_id": entity_id})
        return True

    def _index_of(self, entities: list[E], entity_id: int) -> int:
        for index, entity in enumerate(entities):
            if entity.id == entity_id:  # type: ignore[attr-defined]
                return index
        raise NotFoundError(self.key, entity_id)


def pick(value, fallback):
    """Supplied value, or fallback when the field was not supplied."""
    return fallback if value is None else value
