# Role: FastAPI app bootstrap. Loads environment config early, registers routers, maps the core error
# taxonomy to HTTP responses, and exposes health/docs endpoints.

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import tour_pricing.config
tour_pricing.config.load_env()
tour_pricing.config.configure_logging()

from tour_pricing.api.assistant import router as assistant_router
from tour_pricing.api.calculator import router as calculator_router
from tour_pricing.api.catalog import router as catalog_router
from tour_pricing.api.currency import router as currency_router
from tour_pricing.core.errors import (
    ComputationError,
    NotFoundError,
    RequestValidationFailed,
    UnsupportedCurrencyError,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Tour Pricing API", version="0.1.0")
app.include_router(calculator_router)
app.include_router(currency_router)
app.include_router(catalog_router)
app.include_router(assistant_router)


@app.exception_handler(RequestValidationFailed)
def _validation_failed(_: Request, exc: RequestValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(NotFoundError)
def _not_found(_: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"message": str(exc), "entity": exc.entity, "id": exc.entity_id},
    )


@app.exception_handler(UnsupportedCurrencyError)
def _unsupported_currency(_: Request, exc: UnsupportedCurrencyError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": str(exc)})


@app.exception_handler(ComputationError)
def _computation_error(_: Request, exc: ComputationError) -> JSONResponse:
    logger.error("Price computation failed: %s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Failed to calculate tour price"})


@app.exception_handler(StarletteHTTPException)
def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.get("/")
def root() -> dict:
    # Quick discoverability for clients (where are docs/health).
    return {
        "message": "Tour Pricing API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tour_pricing.main:app", host="127.0.0.1", port=8000, reload=tour_pricing.config.DEBUG)
