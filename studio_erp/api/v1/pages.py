from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from studio_erp.api.v1.schemas import (
    FilterRequestSchema,
    FormResponseSchema,
    PageResponseSchema,
    SettingsRequestSchema,
)
from studio_erp.application.exceptions import NotFoundError
from studio_erp.application.use_cases.view_sync import ViewSynchronizer
from studio_erp.wiring.dependencies import get_view_synchronizer

router = APIRouter()


@router.get("/pages/{page}", response_model=PageResponseSchema)
def show_page(page: str, sync: ViewSynchronizer = Depends(get_view_synchronizer)):
    return PageResponseSchema.from_view(sync.navigate(page))


@router.post("/pages/{page}/filter", response_model=PageResponseSchema)
def filter_page(
    page: str,
    req: FilterRequestSchema,
    sync: ViewSynchronizer = Depends(get_view_synchronizer),
):
    return PageResponseSchema.from_view(sync.filter_page(page, req.container_id, req.term))


@router.get("/forms/{kind}", response_model=FormResponseSchema)
def open_form(
    kind: str,
    entity_id: int | None = Query(None),
    sync: ViewSynchronizer = Depends(get_view_synchronizer),
):
    try:
        return FormResponseSchema.from_view(sync.open_form(kind, entity_id))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/settings", response_model=PageResponseSchema)
def save_settings(req: SettingsRequestSchema, sync: ViewSynchronizer = Depends(get_view_synchronizer)):
    return PageResponseSchema.from_view(sync.save_settings(req.dark_mode))


@router.get("/reports/services.csv", response_class=PlainTextResponse)
def export_services_report(sync: ViewSynchronizer = Depends(get_view_synchronizer)):
    return PlainTextResponse(sync.export_services_report(), media_type="text/csv")
