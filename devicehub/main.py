import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from devicehub.config import settings
from devicehub.db import build_engine, init_db, make_session_factory
from devicehub.routes import asset
from devicehub.routes.organization import department_router, employee_router, supplier_router
from devicehub.routes.records import license_router, maintenance_router, warranty_router
from devicehub.services.errors import InventoryError

logger = logging.getLogger(__name__)


def configure_logging(level: str = None):
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def inventory_error_handler(request: Request, exc: InventoryError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def payload_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("%s %s -> 422: invalid payload", request.method, request.url.path)
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid payload", "detail": jsonable_encoder(exc.errors())},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.engine.dispose()


def create_app(database_url: str = None) -> FastAPI:
    configure_logging()
    engine = build_engine(database_url)
    init_db(engine)

    app = FastAPI(
        title="DeviceHub API",
        description="Inventory of organizational IT assets, licenses, warranties and maintenance.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, payload_error_handler)

    app.include_router(asset.router)
    app.include_router(department_router)
    app.include_router(supplier_router)
    app.include_router(employee_router)
    app.include_router(warranty_router)
    app.include_router(license_router)
    app.include_router(maintenance_router)

    return app


def run():
    import uvicorn

    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
