# storefront/api/deps.py
from fastapi import Request

from storefront.services.store_service import StoreService


def get_store(request: Request) -> StoreService:
    return request.app.state.store
