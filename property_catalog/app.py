"""FastAPI application exposing the catalog over JSON."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .config import LOG_FORMAT, LOG_LEVEL, PORT
from .exceptions import ValidationError
from .filters import filter_properties, property_types
from .log import setup_logging
from .models import NewProperty
from .store import FETCH, PropertyStore


def create_app(store: Optional[PropertyStore] = None) -> FastAPI:
    """Build the API around ``store`` (a default store when omitted).

    The store is started and closed by the application lifespan.
    """
    catalog = store if store is not None else PropertyStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await run_in_threadpool(catalog.start)
        try:
            yield
        finally:
            catalog.close()

    app = FastAPI(title="Property Catalog API", lifespan=lifespan)
    app.state.store = catalog

    def _load_failed() -> bool:
        return bool(catalog.error) and catalog.error_kind == FETCH

    def _error(status_code: int, message: Optional[str]) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": message})

    @app.get("/api/properties")
    def list_properties(
        search: str = "", category: str = Query("", alias="type")
    ) -> Any:
        if _load_failed():
            return _error(502, catalog.error)
        visible = filter_properties(catalog.properties, search, category)
        return {
            "properties": [p.to_dict() for p in visible],
            "total": len(catalog.properties),
        }

    @app.get("/api/property-types")
    def list_property_types() -> Any:
        if _load_failed():
            return _error(502, catalog.error)
        return property_types(catalog.properties)

    @app.post("/api/refresh")
    def refresh() -> Any:
        result = catalog.refetch()
        if not result.ok:
            return _error(502, result.error)
        return {"total": len(catalog.properties)}

    @app.post("/api/properties")
    def add_property(body: Dict[str, Any] = Body(...)) -> Any:
        try:
            candidate = NewProperty.from_dict(body)
        except (AttributeError, TypeError, ValueError) as e:
            return _error(422, str(e))
        result = catalog.create(candidate)
        if not result.ok:
            status = 422 if isinstance(result.exception, ValidationError) else 502
            return _error(status, result.error)
        return JSONResponse(
            status_code=201,
            content={"properties": [p.to_dict() for p in catalog.properties]},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    setup_logging(LOG_LEVEL, LOG_FORMAT)
    uvicorn.run("property_catalog.app:app", host="0.0.0.0", port=PORT, reload=True)
