from __future__ import annotations

import csv
import io
import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping

from studio_erp.application.exceptions import NotFoundError, RenderTargetMissing, ValidationError
from studio_erp.application.ports.renderer import RendererPort
from studio_erp.application.repositories.collection import CollectionRepository
from studio_erp.application.repositories.studio import StudioRepository
from studio_erp.application.utils import derived_views, templates
from studio_erp.application.utils.chart_options import chart_options
from studio_erp.application.utils.formatting import page_title
from studio_erp.application.utils.forms import (
    FormData,
    parse_client_form,
    parse_product_form,
    parse_quantity,
    parse_service_form,
)
from studio_erp.domain.entities.client import Client
from studio_erp.domain.entities.inventory_item import InventoryItem
from studio_erp.domain.entities.page import FormView, Notice, NoticeLevel, Page, PageView
from studio_erp.domain.entities.service import DEFAULT_SERVICE_COLOR, DEFAULT_SERVICE_ICON, Service

PAGE_LAYOUTS: dict[Page, tuple[str, ...]] = {
    Page.dashboard: ("statCards", "servicesChart", "revenueChart", "recentClients"),
    Page.services: ("servicesGrid",),
    Page.clients: ("clientsTableBody",),
    Page.inventory: ("lowStockAlert", "inventoryTableBody"),
    Page.reports: ("revenueShareChart", "clientTypeChart", "servicesReportBody"),
    Page.settings: ("settingsPanel",),
    Page.unknown: (),
}

PLACEHOLDER_TEXT = "Conteúdo em desenvolvimento"


def _service_form_values(service: Service | None) -> dict[str, str]:
    if service is None:
        return {"id": "", "name": "", "price": "0.00", "icon": DEFAULT_SERVICE_ICON,
                "color": DEFAULT_SERVICE_COLOR, "description": ""}
    return {
        "id": str(service.id),
        "name": service.name,
        "price": f"{service.price:.2f}",
        "icon": service.icon,
        "color": service.color,
        "description": service.description,
    }


def _client_form_values(client: Client | None, today: date) -> dict[str, str]:
    if client is None:
        return {"id": "", "name": "", "phone": "", "email": "", "hairType": "",
                "allergies": "", "lastVisit": today.isoformat(), "notes": ""}
    return {
        "id": str(client.id),
        "name": client.name,
        "phone": client.phone,
        "email": client.email,
        "hairType": client.hair_type,
        "allergies": ", ".join(client.allergies),
        "lastVisit": client.last_visit.isoformat() if client.last_visit else "",
        "notes": client.notes,
    }


def _product_form_values(item: InventoryItem | None) -> dict[str, str]:
    if item is None:
        return {"id": "", "name": "", "quantity": "0", "minQuantity": "1", "price": "0.00",
                "category": "", "description": ""}
    return {
        "id": str(item.id),
        "name": item.name,
        "quantity": str(item.quantity),
        "minQuantity": str(item.min),
        "price": f"{item.price:.2f}",
        "category": item.category,
        "description": item.description,
    }


@dataclass(frozen=True)
class _EntityKind:
    name: str
    label: str
    page: Page
    parse: Callable[[FormData], Any]
    repository: Callable[[StudioRepository], CollectionRepository]
    # repository error keys that differ from the form field names
    field_aliases: Mapping[str, str]


ENTITY_KINDS: dict[str, _EntityKind] = {
    "service": _EntityKind("service", "Serviço", Page.services, parse_service_form,
                           lambda repo: repo.services, {}),
    "client": _EntityKind("client", "Cliente", Page.clients, parse_client_form,
                          lambda repo: repo.clients, {}),
    "product": _EntityKind("product", "Produto", Page.inventory, parse_product_form,
                           lambda repo: repo.inventory, {"min": "minQuantity"}),
}


class ViewSynchronizer:
    """
    Renders pages from the latest repository state and turns user events into repository calls.

    Each public method is one UI event and runs to completion under a single lock.
    Every successful mutation re-synchronizes the page that lists the mutated collection.
    """

    def __init__(
        self,
        repository: StudioRepository,
        renderer: RendererPort,
        today: Callable[[], date] = date.today,
        currency_symbol: str = "R$",
        recent_visit_days: int = 30,
        layouts: Mapping[Page, tuple[str, ...]] | None = None,
    ) -> None:
        self._repo = repository
        self._renderer = renderer
        self._today = today
        self._currency = currency_symbol
        self._recent_days = recent_visit_days
        self._layouts = dict(layouts or PAGE_LAYOUTS)
        self._page = Page.dashboard
        self._page_name = Page.dashboard.value
        self._dark_mode = False
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def current_page(self) -> Page:
        return self._page

    # Navigation

    def navigate(self, name: str) -> PageView:
        with self._lock:
            self._page = Page.from_name(name)
            self._page_name = (name or "").lower().strip() or Page.unknown.value
            self._logger.info("Navigate", extra={"page": self._page.value})
            return self._synchronize([])

    def synchronize(self) -> PageView:
        with self._lock:
            return self._synchronize([])

    def _show(self, page: Page, notices: list[Notice]) -> PageView:
        self._page = page
        self._page_name = page.value
        return self._synchronize(notices)

    def _synchronize(self, notices: list[Notice]) -> PageView:
        page = self._page
        title = page_title(self._page_name)
        self._dark_mode = self._repo.preferences.dark_mode()
        self._renderer.mount(title, self._layouts.get(page, ()))

        render = {
            Page.dashboard: self._render_dashboard,
            Page.services: self._render_services,
            Page.clients: self._render_clients,
            Page.inventory: self._render_inventory,
            Page.reports: self._render_reports,
            Page.settings: self._render_settings,
        }.get(page)
        if render is not None:
            render()

        return self._snapshot(notices)

    def _snapshot(self, notices: list[Notice]) -> PageView:
        return PageView(
            page=self._page,
            title=page_title(self._page_name),
            containers=self._renderer.containers(),
            charts=self._renderer.charts(),
            placeholder=PLACEHOLDER_TEXT if self._page is Page.unknown else None,
            notices=list(notices),
            dark_mode=self._dark_mode,
        )

    def _try_render(self, draw: Callable[[], None]) -> None:
        try:
            draw()
        except RenderTargetMissing as e:
            self._logger.debug("Render target not on page, skipped", extra={"container_id": e.target_id})

    # Page renderers

    def _render_dashboard(self) -> None:
        services = self._repo.services.all()
        clients = self._repo.clients.all()
        inventory = self._repo.inventory.all()
        dark_mode = self._dark_mode
        today = self._today()

        cards = [
            ("totalClients", "Total de Clientes", derived_views.total_clients(clients)),
            ("servicesLast30Days", "Serviços (30 dias)", derived_views.total_service_count_30d(services)),
            ("lowStock", "Estoque Baixo", derived_views.low_stock_count(inventory)),
        ]
        self._try_render(lambda: self._renderer.render_list("statCards", cards, templates.stat_card_row))
        self._try_render(lambda: self._renderer.render_chart(
            "servicesChart",
            "bar",
            [s.name for s in services],
            [{
                "label": "Serviços Realizados (últimos 30 dias)",
                "data": [s.count for s in services],
                "backgroundColor": [s.color for s in services],
            }],
            chart_options(dark_mode, {"plugins": {"legend": {"display": False}}}),
        ))
        report = derived_views.service_revenue_report(services)
        self._try_render(lambda: self._renderer.render_chart(
            "revenueChart",
            "bar",
            [row.name for row in report],
            [{
                "label": f"Faturamento ({self._currency})",
                "data": [row.revenue for row in report],
                "backgroundColor": [s.color for s in services],
            }],
            chart_options(dark_mode, {"plugins": {"legend": {"position": "top"}}}),
        ))
        self._try_render(lambda: self._renderer.render_list(
            "recentClients",
            derived_views.recent_clients(clients),
            lambda c: templates.client_row(c, today, self._recent_days),
        ))

    def _render_services(self) -> None:
        services = self._repo.services.all()
        self._try_render(lambda: self._renderer.render_list(
            "servicesGrid", services, lambda s: templates.service_card_row(s, self._currency)
        ))

    def _render_clients(self) -> None:
        clients = self._repo.clients.all()
        today = self._today()
        self._try_render(lambda: self._renderer.render_list(
            "clientsTableBody", clients, lambda c: templates.client_row(c, today, self._recent_days)
        ))

    def _render_inventory(self) -> None:
        inventory = self._repo.inventory.all()
        low_count = derived_views.low_stock_count(inventory)
        alerts = [low_count] if low_count > 0 else []
        self._try_render(lambda: self._renderer.render_list("lowStockAlert", alerts, templates.low_stock_alert_row))
        self._try_render(lambda: self._renderer.render_list(
            "inventoryTableBody", inventory, lambda i: templates.inventory_row(i, self._currency)
        ))

    def _render_reports(self) -> None:
        services = self._repo.services.all()
        clients = self._repo.clients.all()
        report = derived_views.service_revenue_report(services)
        hair_types = derived_views.hair_type_distribution(clients)

        self._try_render(lambda: self._renderer.render_list(
            "servicesReportBody", report, lambda r: templates.revenue_report_row(r, self._currency)
        ))
        self._try_render(lambda: self._renderer.render_chart(
            "revenueShareChart",
            "doughnut",
            [row.name for row in report],
            [{"data": [round(row.percentage, 1) for row in report],
              "backgroundColor": [s.color for s in services]}],
            chart_options(self._dark_mode, {"plugins": {"legend": {"position": "bottom"}}}, axes=False),
        ))
        self._try_render(lambda: self._renderer.render_chart(
            "clientTypeChart",
            "doughnut",
            [label for label, _ in hair_types],
            [{"data": [count for _, count in hair_types]}],
            chart_options(self._dark_mode, {"plugins": {"legend": {"position": "bottom"}}}, axes=False),
        ))

    def _render_settings(self) -> None:
        settings_rows = [("darkMode", "Modo Escuro", self._dark_mode)]
        self._try_render(lambda: self._renderer.render_list("settingsPanel", settings_rows, templates.setting_row))

    # Live search

    def filter(self, container_id: str, term: str) -> PageView:
        """Hide rendered rows whose text does not contain term. Never touches the repository."""
        with self._lock:
            try:
                self._renderer.filter_rows(container_id, term)
            except RenderTargetMissing:
                self._logger.debug("Filter target not on page, skipped", extra={"container_id": container_id})
            return self._snapshot([])

    def filter_page(self, name: str, container_id: str, term: str) -> PageView:
        """Filter on the named page, navigating there first when another page is shown."""
        with self._lock:
            if self._page_name != (name or "").lower().strip():
                self.navigate(name)
            return self.filter(container_id, term)

    # Forms

    def open_form(self, kind: str, entity_id: int | None = None) -> FormView:
        with self._lock:
            entity_kind = self._kind(kind)
            entity = None
            if entity_id is not None:
                entity = entity_kind.repository(self._repo).find_by_id(entity_id)
                if entity is None:
                    raise NotFoundError(entity_kind.repository(self._repo).key, entity_id)
            return FormView(
                kind=entity_kind.name,
                title=f"{'Editar' if entity is not None else 'Novo'} {entity_kind.label}",
                entity_id=entity_id,
                values=self._form_values(entity_kind.name, entity),
            )

    def _form_values(self, kind: str, entity: Any) -> dict[str, str]:
        if kind == "service":
            return _service_form_values(entity)
        if kind == "client":
            return _client_form_values(entity, self._today())
        return _product_form_values(entity)

    def _kind(self, kind: str) -> _EntityKind:
        try:
            return ENTITY_KINDS[kind]
        except KeyError:
            raise ValueError(f"Unknown form kind: {kind}") from None

    def submit_form(self, kind: str, form: FormData, entity_id: int | None = None) -> PageView | FormView:
        """Create (no id) or update (id) from a submitted form, then re-render the owning page."""
        with self._lock:
            entity_kind = self._kind(kind)
            repository = entity_kind.repository(self._repo)
            is_edit = entity_id is not None
            try:
                data = entity_kind.parse(form)
                if is_edit:
                    repository.update(entity_id, data)
                else:
                    repository.create(data)
            except ValidationError as e:
                self._logger.info("Form rejected", extra={"collection": repository.key, "error": str(e)})
                errors = {entity_kind.field_aliases.get(k, k): v for k, v in e.fields.items()}
                return FormView(
                    kind=entity_kind.name,
                    title=f"{'Editar' if is_edit else 'Novo'} {entity_kind.label}",
                    entity_id=entity_id,
                    values={k: str(v) for k, v in form.items()},
                    errors=errors,
                    notices=[Notice(NoticeLevel.error, "Corrija os campos destacados.")],
                )
            except NotFoundError:
                notice = Notice(NoticeLevel.error, f"{entity_kind.label} não encontrado.")
                return self._show(entity_kind.page, [notice])

            verb = "atualizado" if is_edit else "cadastrado"
            return self._show(entity_kind.page, [Notice(NoticeLevel.success, f"{entity_kind.label} {verb} com sucesso!")])

    def submit_service_form(self, form: FormData, entity_id: int | None = None) -> PageView | FormView:
        return self.submit_form("service", form, entity_id)

    def submit_client_form(self, form: FormData, entity_id: int | None = None) -> PageView | FormView:
        return self.submit_form("client", form, entity_id)

    def submit_product_form(self, form: FormData, entity_id: int | None = None) -> PageView | FormView:
        return self.submit_form("product", form, entity_id)

    # Deletes

    def delete(self, kind: str, entity_id: int) -> PageView:
        with self._lock:
            entity_kind = self._kind(kind)
            if entity_kind.repository(self._repo).delete(entity_id):
                notice = Notice(NoticeLevel.success, f"{entity_kind.label} excluído com sucesso!")
            else:
                notice = Notice(NoticeLevel.info, f"{entity_kind.label} não encontrado; nada foi excluído.")
            return self._show(entity_kind.page, [notice])

    def delete_service(self, entity_id: int) -> PageView:
        return self.delete("service", entity_id)

    def delete_client(self, entity_id: int) -> PageView:
        return self.delete("client", entity_id)

    def delete_product(self, entity_id: int) -> PageView:
        return self.delete("product", entity_id)

    # Inventory and settings

    def update_inventory_quantity(self, entity_id: int, quantity: str | int) -> PageView:
        with self._lock:
            try:
                self._repo.inventory.set_quantity(entity_id, parse_quantity(str(quantity)))
            except ValidationError as e:
                return self._show(Page.inventory, [Notice(NoticeLevel.error, e.fields["quantity"])])
            except NotFoundError:
                return self._show(Page.inventory, [Notice(NoticeLevel.error, "Produto não encontrado.")])
            return self._show(Page.inventory, [])

    def save_settings(self, dark_mode: bool) -> PageView:
        with self._lock:
            self._repo.preferences.set_dark_mode(dark_mode)
            mode = "escuro" if dark_mode else "claro"
            return self._show(Page.settings, [Notice(NoticeLevel.success, f"Modo {mode} ativado com sucesso!")])

    # Export

    def export_services_report(self) -> str:
        """Services revenue report as CSV text."""
        with self._lock:
            report = derived_views.service_revenue_report(self._repo.services.all())
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Serviço", "Quantidade", "Faturamento", "% do Total"])
        for row in report:
            writer.writerow([row.name, row.count, f"{row.revenue:.2f}", f"{row.percentage:.1f}"])
        return buffer.getvalue()
