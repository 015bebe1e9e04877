from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from studio_erp.api.v1.schemas import FormResponseSchema, PageResponseSchema, QuantityRequestSchema
from studio_erp.application.use_cases.view_sync import ViewSynchronizer
from studio_erp.domain.entities.page import FormView, PageView
from studio_erp.wiring.dependencies import get_view_synchronizer

router = APIRouter()

COLLECTION_KINDS = {"services": "service", "clients": "client", "inventory": "product"}


def _form_fields(payload: dict[str, Any]) -> dict[str, str]:
    return {k: "" if v is None else str(v) for k, v in payload.items()}


def _respond(result: PageView | FormView):
    if isinstance(result, FormView):
        body = FormResponseSchema.from_view(result).model_dump(mode="json")
        return JSONResponse(status_code=422, content=body)
    return PageResponseSchema.from_view(result)


def _register(collection: str, kind: str) -> None:
    @router.post(f"/{collection}", response_model=PageResponseSchema, name=f"create_{kind}")
    def create(
        payload: dict[str, Any] = Body(...),
        sync: ViewSynchronizer = Depends(get_view_synchronizer),
    ):
        return _respond(sync.submit_form(kind, _form_fields(payload)))

    @router.put(f"/{collection}/{{entity_id}}", response_model=PageResponseSchema, name=f"update_{kind}")
    def update(
        entity_id: int,
        payload: dict[str, Any] = Body(...),
        sync: ViewSynchronizer = Depends(get_view_synchronizer),
    ):
        return _respond(sync.submit_form(kind, _form_fields(payload), entity_id))

    @router.delete(f"/{collection}/{{entity_id}}", response_model=PageResponseSchema, name=f"delete_{kind}")
    def delete(entity_id: int, sync: ViewSynchronizer = Depends(get_view_synchronizer)):
        return _respond(sync.delete(kind, entity_id))


for _collection, _kind in COLLECTION_KINDS.items():
    _register(_collection, _kind)


@router.put("/inventory/{entity_id}/quantity", response_model=PageResponseSchema)
def update_quantity(
    entity_id: int,
    req: QuantityRequestSchema,
    sync: ViewSynchronizer = Depends(get_view_synchronizer),
):
    return _respond(sync.update_inventory_quantity(entity_id, req.quantity))
