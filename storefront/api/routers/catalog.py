# storefront/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import get_store
from storefront.domain.schemas import (
    CategoryOut,
    Product,
    ProductDetailOut,
    ProductQuery,
    SortKey,
)
from storefront.services.store_service import StoreService

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=List[CategoryOut])
def list_categories(store: StoreService = Depends(get_store)):
    return [
        CategoryOut(category=category, product_count=count)
        for category, count in store.list_categories()
    ]


@router.get("/categories/{category_id}/products", response_model=List[Product])
def category_products(category_id: str, store: StoreService = Depends(get_store)):
    if store.get_category(category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return store.products_by_category(category_id)


@router.get("/products", response_model=List[Product])
def list_products(
    search: str = "",
    category: str = "all",
    in_stock: bool = Query(False, description="Only products with stock"),
    frozen: bool = Query(False, description="Only frozen products"),
    sort: SortKey = "newest",
    store: StoreService = Depends(get_store),
):
    query = ProductQuery(
        search=search,
        category=category,
        in_stock_only=in_stock,
        frozen_only=frozen,
        sort=sort,
    )
    return store.list_products(query)


@router.get("/products/featured", response_model=List[Product])
def featured_products(store: StoreService = Depends(get_store)):
    return store.featured_products()


@router.get("/products/{slug}", response_model=ProductDetailOut)
def get_product(slug: str, store: StoreService = Depends(get_store)):
    product = store.get_product_by_slug(slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductDetailOut(
        product=product,
        category=store.get_category(product.category_id),
        related=store.related_products(product),
    )


@router.post("/products", response_model=Product, status_code=201)
def add_product(payload: Product, store: StoreService = Depends(get_store)):
    try:
        return store.add_product(payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/products/{product_id}", response_model=Product)
def update_product(product_id: str, payload: Product, store: StoreService = Depends(get_store)):
    if payload.id != product_id:
        raise HTTPException(status_code=400, detail="Product id mismatch")
    try:
        return store.update_product(payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/products/{product_id}", status_code=204)
def delete_product(product_id: str, store: StoreService = Depends(get_store)):
    try:
        store.delete_product(product_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
