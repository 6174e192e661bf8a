# storefront/main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.routers import auth, cart, catalog, coupons, health, orders
from storefront.repos.slot_repo import RedisSlotRepo, SlotStorageError, SqlSlotRepo
from storefront.services.persistence import SlotPersistence
from storefront.services.store_service import StoreService
from storefront.utils.logging import get_logger
from storefront.utils.settings import STORAGE_BACKEND

logger = get_logger(__name__)


def build_store(backend: str = STORAGE_BACKEND) -> StoreService:
    if backend == "redis":
        repo = RedisSlotRepo.from_url()
    elif backend == "sql":
        repo = SqlSlotRepo.from_url()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}")

    logger.info(f"Loading store from {backend} slot storage")
    return StoreService(SlotPersistence(repo))


def create_app(store: Optional[StoreService] = None) -> FastAPI:
    app = FastAPI(
        title="Kawther Storefront",
        version="1.0.0",
    )
    app.state.store = store or build_store()

    @app.exception_handler(SlotStorageError)
    def storage_unavailable(request: Request, exc: SlotStorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(catalog.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    app.include_router(coupons.router)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
