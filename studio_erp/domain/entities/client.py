from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    phone: str = ""
    email: str = ""
    hair_type: str = ""  # "Liso", "Ondulado", "Cacheado", "Crespo" or free text
    allergies: tuple[str, ...] = field(default_factory=tuple)
    last_visit: date | None = None
    total_visits: int = 1
    notes: str = ""


@dataclass(frozen=True)
class ClientInput:
    """Partial client. None means the field was not supplied.

    clear_last_visit drops the stored visit date; last_visit cannot say that
    because None already means "keep".
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    hair_type: str | None = None
    allergies: tuple[str, ...] | None = None
    last_visit: date | None = None
    total_visits: int | None = None
    notes: str | None = None
    clear_last_visit: bool = False
