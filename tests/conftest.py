from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.domain.schemas import Coupon, Product, WeightOption
from storefront.main import create_app
from storefront.repos.slot_repo import SqlSlotRepo
from storefront.services.persistence import SlotPersistence
from storefront.services.pricing import PricingRules
from storefront.services.store_service import StoreService
from storefront.utils.settings import ADMIN_EMAIL

RULES = PricingRules(
    shipping_fee=Decimal("50"),
    free_shipping_threshold=Decimal("1000"),
    cold_chain_fee=Decimal("30"),
)


def make_product(
    product_id,
    price,
    deltas=(0,),
    stock=10,
    frozen=False,
    category="cat-grocery",
    badges=(),
    name_en=None,
):
    return Product(
        id=product_id,
        slug=product_id,
        name_ar=f"منتج {product_id}",
        name_en=name_en or f"Product {product_id}",
        desc_en=f"Description of {product_id}",
        category_id=category,
        price=price,
        sku=f"SKU-{product_id}",
        weight_options=tuple(
            WeightOption(
                label_ar=f"{500 * (i + 1)} جرام",
                label_en=f"{500 * (i + 1)} g",
                grams=500 * (i + 1),
                price_delta=delta,
            )
            for i, delta in enumerate(deltas)
        ),
        stock_qty=stock,
        is_frozen=frozen,
        badges=badges,
    )


@pytest.fixture
def products():
    return [
        make_product("chicken", 100, deltas=(0, 20), stock=5, frozen=True,
                     category="cat-frozen", badges=("bestseller",), name_en="Frozen Chicken"),
        make_product("rice", 250, stock=50, badges=("new",), name_en="Basmati Rice"),
        make_product("beef", 333, stock=0, category="cat-meat", name_en="Minced Beef"),
        make_product("oil", 1000, stock=3, name_en="Sunflower Oil"),
    ]


@pytest.fixture
def coupons():
    return [
        Coupon(code="TEN", type="percent", value=10, active=True, min_subtotal=400),
        Coupon(code="BIG", type="percent", value=5, active=True, min_subtotal=1000),
        Coupon(code="FLAT", type="fixed", value=500, active=True, min_subtotal=0),
        Coupon(code="OLD", type="percent", value=50, active=False, min_subtotal=0),
    ]


@pytest.fixture
def persistence():
    return SlotPersistence(SqlSlotRepo.from_url("sqlite://"))


@pytest.fixture
def store(persistence, products, coupons):
    persistence.save(products=products, coupons=coupons)
    return StoreService(persistence, rules=RULES)


@pytest.fixture
def admin_store(store):
    store.login(ADMIN_EMAIL, "whatever")
    return store


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
