# storefront/services/catalog_service.py
from typing import Iterable, List, Optional, Sequence

from storefront.domain.schemas import Category, Product, ProductQuery

FEATURED_LIMIT = 8
RELATED_LIMIT = 4


def _matches_search(product: Product, text: str) -> bool:
    needle = text.lower()
    return any(
        needle in field.lower()
        for field in (product.name_ar, product.name_en, product.desc_ar, product.desc_en)
    )


def filter_products(products: Iterable[Product], query: ProductQuery) -> List[Product]:
    """Listing page: search, category, availability filters, then sort."""
    result = list(products)

    if query.search:
        result = [p for p in result if _matches_search(p, query.search)]

    if query.category and query.category != "all":
        result = [p for p in result if p.category_id == query.category]

    if query.in_stock_only:
        result = [p for p in result if p.stock_qty > 0]

    if query.frozen_only:
        result = [p for p in result if p.is_frozen]

    # sorted() is stable, badge sorts keep catalog order within each group
    if query.sort == "priceAsc":
        result.sort(key=lambda p: p.price)
    elif query.sort == "priceDesc":
        result.sort(key=lambda p: p.price, reverse=True)
    elif query.sort == "bestselling":
        result.sort(key=lambda p: "bestseller" not in p.badges)
    else:
        result.sort(key=lambda p: "new" not in p.badges)

    return result


def products_by_category(products: Iterable[Product], category_id: str) -> List[Product]:
    return [p for p in products if p.category_id == category_id]


def featured_products(products: Iterable[Product]) -> List[Product]:
    featured = [p for p in products if "bestseller" in p.badges or "new" in p.badges]
    return featured[:FEATURED_LIMIT]


def related_products(products: Iterable[Product], product: Product) -> List[Product]:
    same_category = [
        p for p in products_by_category(products, product.category_id) if p.id != product.id
    ]
    return same_category[:RELATED_LIMIT]


def find_category(categories: Sequence[Category], category_id: str) -> Optional[Category]:
    return next((c for c in categories if c.id == category_id), None)


def find_product(products: Iterable[Product], product_id: str) -> Optional[Product]:
    return next((p for p in products if p.id == product_id), None)


def find_product_by_slug(products: Iterable[Product], slug: str) -> Optional[Product]:
    return next((p for p in products if p.slug == slug), None)


# admin
# slugs shadowed by fixed routes under /products
RESERVED_SLUGS = frozenset({"featured"})


def _check_slug(products: Iterable[Product], product: Product) -> None:
    if product.slug in RESERVED_SLUGS:
        raise ValueError(f"Slug {product.slug} is reserved")
    if any(p.slug == product.slug and p.id != product.id for p in products):
        raise ValueError(f"Slug {product.slug} already in use")


def add_product(products: List[Product], product: Product) -> List[Product]:
    if any(p.id == product.id for p in products):
        raise ValueError(f"Product {product.id} already exists")
    _check_slug(products, product)
    return [*products, product]


def replace_product(products: List[Product], product: Product) -> List[Product]:
    if find_product(products, product.id) is None:
        raise LookupError(f"Product {product.id} not found")
    _check_slug(products, product)
    return [product if p.id == product.id else p for p in products]


def remove_product(products: List[Product], product_id: str) -> List[Product]:
    remaining = [p for p in products if p.id != product_id]
    if len(remaining) == len(products):
        raise LookupError(f"Product {product_id} not found")
    return remaining
