# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_store
from storefront.domain.schemas import CheckoutIn, Order, StatusIn
from storefront.services.store_service import StoreService

router = APIRouter(tags=["orders"])


@router.post("/checkout", response_model=Order, status_code=201)
def checkout(payload: CheckoutIn, store: StoreService = Depends(get_store)):
    """
    Places an order from the current cart.
    Stock is decremented and the cart cleared in the same step.
    """
    try:
        return store.place_order(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/orders", response_model=List[Order])
def list_orders(store: StoreService = Depends(get_store)):
    try:
        return store.list_orders()
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/orders/{order_id}", response_model=Order)
def get_order(order_id: str, store: StoreService = Depends(get_store)):
    order = store.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.patch("/orders/{order_id}/status", response_model=Order)
def update_status(order_id: str, payload: StatusIn, store: StoreService = Depends(get_store)):
    try:
        return store.update_order_status(order_id, payload.status)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
