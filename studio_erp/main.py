import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studio_erp.api.v1.pages import router as pages_router
from studio_erp.api.v1.records import router as records_router
from studio_erp.application.exceptions import DecodeError
from studio_erp.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("page", "collection", "entity_id", "key", "container_id", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.BUSINESS_NAME, version="1.0.0")

app.include_router(pages_router, tags=["pages"])
app.include_router(records_router, tags=["records"])


@app.exception_handler(DecodeError)
def decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    logging.getLogger(__name__).error("Corrupted store payload", extra={"key": exc.key, "error": exc.reason})
    return JSONResponse(
        status_code=500,
        content={"detail": f"Dados armazenados em '{exc.key}' estão corrompidos.", "key": exc.key},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
