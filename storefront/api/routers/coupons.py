# storefront/api/routers/coupons.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_store
from storefront.domain.schemas import Coupon
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.get("", response_model=List[Coupon])
def list_coupons(store: StoreService = Depends(get_store)):
    if not store.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return store.coupons


@router.post("", response_model=Coupon, status_code=201)
def add_coupon(payload: Coupon, store: StoreService = Depends(get_store)):
    try:
        return store.add_coupon(payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{code}", response_model=Coupon)
def update_coupon(code: str, payload: Coupon, store: StoreService = Depends(get_store)):
    if payload.code != code:
        raise HTTPException(status_code=400, detail="Coupon code mismatch")
    try:
        return store.update_coupon(payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{code}", status_code=204)
def delete_coupon(code: str, store: StoreService = Depends(get_store)):
    try:
        store.delete_coupon(code)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
