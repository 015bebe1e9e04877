from __future__ import annotations


class StudioError(Exception):
    """Base class for errors raised by the data store and view layers."""


class NotFoundError(StudioError):
    """Raised when an id does not exist in a collection."""

    def __init__(self, collection: str, entity_id: int) -> None:
        super().__init__(f"{collection} record {entity_id} not found")
        self.collection = collection
        self.entity_id = entity_id


class DecodeError(StudioError):
    """Raised when a stored payload exists but cannot be parsed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Stored value for {key!r} is corrupted: {reason}")
        self.key = key
        self.reason = reason


class ValidationError(StudioError):
    """Raised when user input is missing or out of range. Keys are form field names."""

    def __init__(self, fields: dict[str, str]) -> None:
        super().__init__("; ".join(f"{name}: {message}" for name, message in fields.items()))
        self.fields = dict(fields)


class RenderTargetMissing(StudioError):
    """Raised by a renderer when the named container or canvas is not mounted."""

    def __init__(self, target_id: str) -> None:
        super().__init__(f"Render target {target_id!r} is not mounted")
        self.target_id = target_id
