# storefront/data/seed.py
from typing import List, Tuple

from storefront.domain.schemas import (
    Cart,
    Category,
    Coupon,
    DeliverySlot,
    Order,
    Product,
    WeightOption,
)

CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="cat-frozen",
        slug="frozen",
        color_token="frozen",
        icon="snowflake",
        name_ar="مجمدات",
        name_en="Frozen Foods",
    ),
    Category(
        id="cat-meat",
        slug="meat",
        color_token="meat",
        icon="meat",
        name_ar="لحوم ودواجن",
        name_en="Meat & Poultry",
    ),
    Category(
        id="cat-grocery",
        slug="grocery",
        color_token="grocery",
        icon="wheat",
        name_ar="بقالة",
        name_en="Grocery",
    ),
)

DELIVERY_SLOTS: Tuple[DeliverySlot, ...] = (
    DeliverySlot(value="morning", label_ar="صباحاً (9 - 12)", label_en="Morning (9 - 12)"),
    DeliverySlot(value="afternoon", label_ar="ظهراً (12 - 4)", label_en="Afternoon (12 - 4)"),
    DeliverySlot(value="evening", label_ar="مساءً (4 - 9)", label_en="Evening (4 - 9)"),
)


def _kg_options(half_kg_delta: int, kg_delta: int) -> Tuple[WeightOption, ...]:
    return (
        WeightOption(label_ar="٥٠٠ جرام", label_en="500 g", grams=500, price_delta=0),
        WeightOption(label_ar="١ كيلو", label_en="1 kg", grams=1000, price_delta=half_kg_delta),
        WeightOption(label_ar="٢ كيلو", label_en="2 kg", grams=2000, price_delta=kg_delta),
    )


PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="p-frozen-chicken-breast",
        slug="frozen-chicken-breast",
        name_ar="صدور دجاج مجمدة",
        name_en="Frozen Chicken Breast",
        desc_ar="صدور دجاج منزوعة العظم، مجمدة سريعاً",
        desc_en="Boneless chicken breast, quick frozen",
        category_id="cat-frozen",
        price=145,
        compare_at_price=165,
        images=("/images/chicken-breast.jpg",),
        sku="KW-FRZ-001",
        weight_options=_kg_options(130, 270),
        stock_qty=40,
        is_frozen=True,
        badges=("bestseller", "offer"),
        tags=("chicken", "protein"),
    ),
    Product(
        id="p-frozen-peas",
        slug="frozen-peas",
        name_ar="بسلة مجمدة",
        name_en="Frozen Green Peas",
        desc_ar="بسلة خضراء مجمدة جاهزة للطهي",
        desc_en="Ready to cook frozen green peas",
        category_id="cat-frozen",
        price=38,
        images=("/images/peas.jpg",),
        sku="KW-FRZ-002",
        weight_options=(
            WeightOption(label_ar="٤٠٠ جرام", label_en="400 g", grams=400, price_delta=0),
            WeightOption(label_ar="١ كيلو", label_en="1 kg", grams=1000, price_delta=45),
        ),
        stock_qty=120,
        is_frozen=True,
        badges=("new",),
        tags=("vegetables",),
    ),
    Product(
        id="p-frozen-shrimp",
        slug="frozen-shrimp",
        name_ar="جمبري مجمد",
        name_en="Frozen Shrimp",
        desc_ar="جمبري مقشر ومنظف",
        desc_en="Peeled and deveined shrimp",
        category_id="cat-frozen",
        price=320,
        images=("/images/shrimp.jpg",),
        sku="KW-FRZ-003",
        weight_options=_kg_options(300, 620),
        stock_qty=0,
        is_frozen=True,
        badges=(),
        tags=("seafood",),
    ),
    Product(
        id="p-beef-mince",
        slug="beef-mince",
        name_ar="لحم بقري مفروم",
        name_en="Minced Beef",
        desc_ar="لحم بقري بلدي مفروم طازج",
        desc_en="Fresh local minced beef",
        category_id="cat-meat",
        price=210,
        images=("/images/beef-mince.jpg",),
        sku="KW-MEA-001",
        weight_options=_kg_options(200, 410),
        stock_qty=25,
        is_frozen=False,
        badges=("bestseller",),
        tags=("beef",),
    ),
    Product(
        id="p-whole-chicken",
        slug="whole-chicken",
        name_ar="دجاجة كاملة",
        name_en="Whole Chicken",
        desc_ar="دجاجة طازجة كاملة منظفة",
        desc_en="Fresh cleaned whole chicken",
        category_id="cat-meat",
        price=125,
        images=("/images/whole-chicken.jpg",),
        sku="KW-MEA-002",
        weight_options=(
            WeightOption(label_ar="١٫٢ كيلو", label_en="1.2 kg", grams=1200, price_delta=0),
            WeightOption(label_ar="١٫٥ كيلو", label_en="1.5 kg", grams=1500, price_delta=30),
        ),
        stock_qty=8,
        is_frozen=False,
        badges=("new",),
        tags=("chicken",),
    ),
    Product(
        id="p-basmati-rice",
        slug="basmati-rice",
        name_ar="أرز بسمتي",
        name_en="Basmati Rice",
        desc_ar="أرز بسمتي هندي طويل الحبة",
        desc_en="Long grain Indian basmati rice",
        category_id="cat-grocery",
        price=75,
        images=("/images/basmati.jpg",),
        sku="KW-GRO-001",
        weight_options=(
            WeightOption(label_ar="١ كيلو", label_en="1 kg", grams=1000, price_delta=0),
            WeightOption(label_ar="٥ كيلو", label_en="5 kg", grams=5000, price_delta=290),
        ),
        stock_qty=200,
        is_frozen=False,
        badges=("offer",),
        tags=("rice", "staples"),
    ),
    Product(
        id="p-sunflower-oil",
        slug="sunflower-oil",
        name_ar="زيت عباد الشمس",
        name_en="Sunflower Oil",
        desc_ar="زيت عباد شمس نقي للطهي",
        desc_en="Pure sunflower cooking oil",
        category_id="cat-grocery",
        price=95,
        images=("/images/sunflower-oil.jpg",),
        sku="KW-GRO-002",
        weight_options=(
            WeightOption(label_ar="٨٠٠ مل", label_en="800 ml", grams=800, price_delta=0),
            WeightOption(label_ar="٢ لتر", label_en="2 L", grams=2000, price_delta=125),
        ),
        stock_qty=60,
        is_frozen=False,
        badges=(),
        tags=("oil", "staples"),
    ),
)

COUPONS: Tuple[Coupon, ...] = (
    Coupon(code="WELCOME10", type="percent", value=10, active=True, min_subtotal=300),
    Coupon(code="SAVE50", type="fixed", value=50, active=True, min_subtotal=500),
    Coupon(code="FROZEN20", type="percent", value=20, active=False, min_subtotal=1000),
)


def seed_products() -> List[Product]:
    return list(PRODUCTS)


def seed_coupons() -> List[Coupon]:
    return list(COUPONS)


def seed_orders() -> List[Order]:
    return []


def empty_cart() -> Cart:
    return Cart()
