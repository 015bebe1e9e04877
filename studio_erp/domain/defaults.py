from __future__ import annotations

from datetime import date

from studio_erp.domain.entities.client import Client
from studio_erp.domain.entities.inventory_item import InventoryItem
from studio_erp.domain.entities.service import Service


DEFAULT_SERVICES: list[Service] = [
    Service(id=1, name="Corte", price=60.0, icon="✂️", color="#16a34a", count=45),
    Service(id=2, name="Coloração", price=120.0, icon="🎨", color="#ea580c", count=28),
    Service(id=3, name="Hidratação", price=80.0, icon="🧴", color="#2563eb", count=32),
]

DEFAULT_CLIENTS: list[Client] = [
    Client(
        id=1,
        name="Ana Silva",
        phone="(11) 98765-4321",
        email="ana@exemplo.com",
        hair_type="Cacheado",
        allergies=("Amônia",),
        last_visit=date(2023, 7, 15),
        total_visits=5,
    ),
    Client(
        id=2,
        name="Carlos Oliveira",
        phone="(11) 91234-5678",
        email="carlos@exemplo.com",
        hair_type="Liso",
        allergies=(),
        last_visit=date(2023, 7, 10),
        total_visits=3,
    ),
]

DEFAULT_INVENTORY: list[InventoryItem] = [
    InventoryItem(id=1, name="Shampoo Hidratante", quantity=3, min=5, price=25.90),
    InventoryItem(id=2, name="Tonalizante Violeta", quantity=7, min=3, price=42.50),
    InventoryItem(id=3, name="Máscara de Reconstrução", quantity=2, min=4, price=68.00),
]

HAIR_TYPES = ("Liso", "Ondulado", "Cacheado", "Crespo")
PRODUCT_CATEGORIES = ("Shampoo", "Condicionador", "Tonalizante", "Máscara", "Outros")
