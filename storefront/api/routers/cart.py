# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_store
from storefront.domain.schemas import CartOut, CouponIn, CouponResult, ItemIn, QtyIn
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartOut)
def get_cart(store: StoreService = Depends(get_store)):
    return store.cart_view()


@router.post("/items", response_model=CartOut)
def add_item(payload: ItemIn, store: StoreService = Depends(get_store)):
    try:
        store.add_to_cart(payload.product_id, payload.weight_option_index, payload.qty)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return store.cart_view()


@router.patch("/items", response_model=CartOut)
def update_item(payload: QtyIn, store: StoreService = Depends(get_store)):
    store.update_cart_item_qty(payload.product_id, payload.weight_option_index, payload.qty)
    return store.cart_view()


@router.delete("/items/{product_id}/{weight_option_index}", response_model=CartOut)
def remove_item(product_id: str, weight_option_index: int, store: StoreService = Depends(get_store)):
    store.remove_from_cart(product_id, weight_option_index)
    return store.cart_view()


@router.delete("", response_model=CartOut)
def clear_cart(store: StoreService = Depends(get_store)):
    store.clear_cart()
    return store.cart_view()


@router.post("/coupon", response_model=CouponResult)
def apply_coupon(payload: CouponIn, store: StoreService = Depends(get_store)):
    result = store.apply_coupon(payload.code)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return result


@router.delete("/coupon", response_model=CartOut)
def remove_coupon(store: StoreService = Depends(get_store)):
    store.remove_coupon()
    return store.cart_view()
