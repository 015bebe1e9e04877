from __future__ import annotations

import math
from datetime import date
from typing import Mapping

from studio_erp.application.exceptions import ValidationError
from studio_erp.domain.entities.client import ClientInput
from studio_erp.domain.entities.inventory_item import InventoryItemInput
from studio_erp.domain.entities.service import ServiceInput

FormData = Mapping[str, str]


class _FormReader:
    """Reads a flat field -> string mapping, collecting parse errors per field."""

    def __init__(self, form: FormData) -> None:
        self._form = form
        self.errors: dict[str, str] = {}

    def text(self, name: str) -> str | None:
        value = self._form.get(name)
        if value is None:
            return None
        return str(value).strip()

    def number(self, name: str, *, integer: bool = False) -> float | int | None:
        raw = self.text(name)
        if raw is None:
            return None
        if raw == "":
            self.errors[name] = "Campo obrigatório"
            return None
        try:
            # Accept the Brazilian decimal comma as well
            value = float(raw.replace(",", "."))
        except ValueError:
            self.errors[name] = "Valor numérico inválido"
            return None
        if not math.isfinite(value):
            self.errors[name] = "Valor numérico inválido"
            return None
        if integer:
            if not value.is_integer():
                self.errors[name] = "Informe um número inteiro"
                return None
            return int(value)
        return value

    def day(self, name: str) -> date | None:
        raw = self.text(name)
        if not raw:
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            self.errors[name] = "Data inválida (use AAAA-MM-DD)"
            return None

    def items(self, name: str) -> tuple[str, ...] | None:
        raw = self.text(name)
        if raw is None:
            return None
        return tuple(part.strip() for part in raw.split(",") if part.strip())

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)


def parse_service_form(form: FormData) -> ServiceInput:
    reader = _FormReader(form)
    data = ServiceInput(
        name=reader.text("name"),
        price=reader.number("price"),
        icon=reader.text("icon"),
        color=reader.text("color"),
        description=reader.text("description"),
    )
    reader.raise_if_invalid()
    return data


def parse_client_form(form: FormData) -> ClientInput:
    reader = _FormReader(form)
    data = ClientInput(
        name=reader.text("name"),
        phone=reader.text("phone"),
        email=reader.text("email"),
        hair_type=reader.text("hairType"),
        allergies=reader.items("allergies"),
        last_visit=reader.day("lastVisit"),
        notes=reader.text("notes"),
        clear_last_visit=reader.text("lastVisit") == "",
    )
    reader.raise_if_invalid()
    return data


def parse_product_form(form: FormData) -> InventoryItemInput:
    reader = _FormReader(form)
    data = InventoryItemInput(
        name=reader.text("name"),
        quantity=reader.number("quantity", integer=True),
        min=reader.number("minQuantity", integer=True),
        price=reader.number("price"),
        category=reader.text("category"),
        description=reader.text("description"),
    )
    reader.raise_if_invalid()
    return data


def parse_quantity(raw: str) -> int:
    reader = _FormReader({"quantity": raw})
    value = reader.number("quantity", integer=True)
    reader.raise_if_invalid()
    return int(value)  # type: ignore[arg-type]
