"""
Tests for page synchronization and UI event handlers.
"""

from __future__ import annotations

from datetime import date

from studio_erp.application.repositories.studio import StudioRepository
from studio_erp.application.use_cases.view_sync import PAGE_LAYOUTS, ViewSynchronizer
from studio_erp.domain.entities.page import FormView, NoticeLevel, Page, PageView
from studio_erp.infrastructure.rendering.memory_document import MemoryDocument
from studio_erp.infrastructure.store.memory_store import MemoryKeyValueStore


class CountingStore(MemoryKeyValueStore):
    def __init__(self) -> None:
        super().__init__()
        self.reads = 0
        self.writes = 0

    def get(self, key):
        self.reads += 1
        return super().get(key)

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


def make_sync(store=None, layouts=None) -> tuple[ViewSynchronizer, StudioRepository]:
    repo = StudioRepository(store or MemoryKeyValueStore())
    sync = ViewSynchronizer(
        repository=repo,
        renderer=MemoryDocument(),
        today=lambda: date(2023, 8, 12),
        layouts=layouts,
    )
    return sync, repo


def _titles(view: PageView, container_id: str) -> list[str]:
    return [row.title for row in view.containers[container_id]]


def test_dashboard_cards_and_charts():
    sync, _ = make_sync()

    view = sync.navigate("dashboard")

    cards = {row.key: row.fields["value"] for row in view.containers["statCards"]}
    assert cards == {"totalClients": 2, "servicesLast30Days": 105, "lowStock": 2}
    assert view.charts["servicesChart"].labels == ["Corte", "Coloração", "Hidratação"]
    assert view.charts["servicesChart"].datasets[0]["data"] == [45, 28, 32]
    assert view.charts["revenueChart"].datasets[0]["data"] == [2700, 3360, 2560]
    assert _titles(view, "recentClients") == ["Ana Silva", "Carlos Oliveira"]


def test_unknown_page_renders_placeholder_until_next_navigation():
    sync, _ = make_sync()

    view = sync.navigate("agenda")
    assert view.page is Page.unknown
    assert view.title == "Agenda"
    assert view.placeholder == "Conteúdo em desenvolvimento"
    assert view.containers == {}

    assert sync.synchronize().page is Page.unknown
    assert sync.navigate("clients").page is Page.clients


def test_create_service_resynchronizes_services_page():
    sync, repo = make_sync()
    sync.navigate("dashboard")

    view = sync.submit_service_form({"name": "Manicure", "price": "40", "icon": "", "color": "", "description": ""})

    assert isinstance(view, PageView)
    assert view.page is Page.services
    assert _titles(view, "servicesGrid") == ["Corte", "Coloração", "Hidratação", "Manicure"]
    assert view.notices[0].level is NoticeLevel.success
    manicure = view.containers["servicesGrid"][-1]
    assert manicure.fields["icon"] == "✂️"
    assert manicure.fields["price"] == "R$ 40.00"
    assert len(repo.services.all()) == 4


def test_edit_service_keeps_count():
    sync, repo = make_sync()

    view = sync.submit_service_form(
        {"name": "Corte Premium", "price": "75", "icon": "✂️", "color": "#16a34a", "description": ""},
        entity_id=1,
    )

    assert _titles(view, "servicesGrid")[0] == "Corte Premium"
    assert view.containers["servicesGrid"][0].fields["count"] == 45
    assert repo.services.find_by_id(1).price == 75


def test_invalid_form_returns_form_view_without_persisting():
    sync, repo = make_sync()

    result = sync.submit_service_form({"name": "", "price": "-5"})

    assert isinstance(result, FormView)
    assert set(result.errors) == {"name", "price"}
    assert result.values["price"] == "-5"
    assert result.notices[0].level is NoticeLevel.error
    assert len(repo.services.all()) == 3


def test_non_finite_price_returns_form_view():
    sync, repo = make_sync()

    result = sync.submit_service_form({"name": "X", "price": "nan"})

    assert isinstance(result, FormView)
    assert result.errors == {"price": "Valor numérico inválido"}
    assert len(repo.services.all()) == 3

    result = sync.submit_service_form({"name": "Corte", "price": "inf"}, entity_id=1)

    assert isinstance(result, FormView)
    assert repo.services.find_by_id(1).price == 60


def test_edit_client_with_empty_date_clears_last_visit():
    sync, repo = make_sync()

    view = sync.submit_client_form(
        {"name": "Ana Silva", "phone": "", "email": "", "hairType": "Liso", "allergies": "", "lastVisit": "", "notes": ""},
        entity_id=1,
    )

    row = next(row for row in view.containers["clientsTableBody"] if row.key == "1")
    assert row.fields["lastVisit"] == "Nunca"
    assert row.fields["recent"] is False
    assert repo.clients.find_by_id(1).last_visit is None


def test_product_errors_use_form_field_names():
    sync, _ = make_sync()

    result = sync.submit_product_form({"name": "Gel", "quantity": "1", "minQuantity": "-1", "price": "1"})

    assert isinstance(result, FormView)
    assert "minQuantity" in result.errors


def test_update_of_missing_record_shows_notice():
    sync, _ = make_sync()

    view = sync.submit_client_form({"name": "Fantasma"}, entity_id=404)

    assert isinstance(view, PageView)
    assert view.page is Page.clients
    assert view.notices[0].level is NoticeLevel.error


def test_delete_client_and_unknown_delete():
    sync, _ = make_sync()

    view = sync.delete_client(2)
    assert _titles(view, "clientsTableBody") == ["Ana Silva"]
    assert view.notices[0].level is NoticeLevel.success

    view = sync.delete_client(2)
    assert _titles(view, "clientsTableBody") == ["Ana Silva"]
    assert view.notices[0].level is NoticeLevel.info


def test_clients_page_flags_recent_visits():
    sync, _ = make_sync()

    view = sync.navigate("clients")

    rows = {row.title: row.fields for row in view.containers["clientsTableBody"]}
    assert rows["Ana Silva"]["recent"] is True
    assert rows["Ana Silva"]["lastVisit"] == "15/07/2023"
    assert rows["Carlos Oliveira"]["recent"] is False


def test_inventory_quantity_change_updates_status_and_alert():
    sync, _ = make_sync()

    view = sync.navigate("inventory")
    assert view.containers["lowStockAlert"][0].fields["count"] == 2

    view = sync.update_inventory_quantity(1, "8")
    statuses = {row.key: row.fields["status"] for row in view.containers["inventoryTableBody"]}
    assert statuses == {"1": "OK", "2": "OK", "3": "Baixo"}
    assert view.containers["lowStockAlert"][0].fields["count"] == 1

    view = sync.update_inventory_quantity(3, "4")
    assert view.containers["lowStockAlert"] == []


def test_inventory_quantity_rejects_negative():
    sync, repo = make_sync()

    view = sync.update_inventory_quantity(1, "-3")

    assert view.notices[0].level is NoticeLevel.error
    assert repo.inventory.find_by_id(1).quantity == 3


def test_filter_toggles_rendered_rows_without_store_access():
    store = CountingStore()
    sync, _ = make_sync(store)
    sync.navigate("services")
    reads, writes = store.reads, store.writes

    view = sync.filter("servicesGrid", "HIDRA")

    visible = {row.title: row.visible for row in view.containers["servicesGrid"]}
    assert visible == {"Corte": False, "Coloração": False, "Hidratação": True}
    assert (store.reads, store.writes) == (reads, writes)

    view = sync.filter("servicesGrid", "")
    assert all(row.visible for row in view.containers["servicesGrid"])


def test_filter_page_navigates_then_filters():
    store = CountingStore()
    sync, _ = make_sync(store)
    sync.navigate("dashboard")

    view = sync.filter_page("Clients", "clientsTableBody", "carl")

    assert view.page is Page.clients
    visible = {row.title: row.visible for row in view.containers["clientsTableBody"]}
    assert visible == {"Ana Silva": False, "Carlos Oliveira": True}

    reads, writes = store.reads, store.writes
    view = sync.filter_page("clients", "clientsTableBody", "ana")

    assert _titles(view, "clientsTableBody") == ["Ana Silva", "Carlos Oliveira"]
    assert [row.visible for row in view.containers["clientsTableBody"]] == [True, False]
    assert (store.reads, store.writes) == (reads, writes)


def test_missing_render_target_is_skipped():
    layouts = dict(PAGE_LAYOUTS)
    layouts[Page.dashboard] = ("statCards",)
    sync, _ = make_sync(layouts=layouts)

    view = sync.navigate("dashboard")

    assert view.charts == {}
    assert len(view.containers["statCards"]) == 3


def test_reports_page():
    sync, _ = make_sync()

    view = sync.navigate("reports")

    rows = view.containers["servicesReportBody"]
    assert [row.title for row in rows] == ["Corte", "Coloração", "Hidratação"]
    assert rows[0].fields["revenue"] == "R$ 2700.00"
    assert view.charts["clientTypeChart"].labels == ["Liso", "Cacheado"]


def test_save_settings_persists_dark_mode():
    sync, repo = make_sync()

    view = sync.save_settings(True)

    assert view.page is Page.settings
    assert view.dark_mode is True
    assert view.containers["settingsPanel"][0].fields["enabled"] is True
    assert repo.preferences.dark_mode() is True


def test_reports_charts_follow_dark_mode():
    sync, _ = make_sync()
    sync.save_settings(True)

    view = sync.navigate("reports")

    for chart_id in ("revenueShareChart", "clientTypeChart"):
        options = view.charts[chart_id].options
        assert options["plugins"]["tooltip"]["backgroundColor"] == "#1e293b"
        assert options["plugins"]["legend"] == {"position": "bottom"}
        assert "scales" not in options


def test_open_form_prefills_values():
    sync, _ = make_sync()

    form = sync.open_form("product", 3)
    assert form.title == "Editar Produto"
    assert form.values["minQuantity"] == "4"
    assert form.values["price"] == "68.00"

    blank = sync.open_form("client")
    assert blank.title == "Novo Cliente"
    assert blank.values["lastVisit"] == "2023-08-12"


def test_export_services_report_csv():
    sync, _ = make_sync()

    lines = sync.export_services_report().splitlines()

    assert lines[0] == "Serviço,Quantidade,Faturamento,% do Total"
    assert lines[1] == "Corte,45,2700.00,31.3"
