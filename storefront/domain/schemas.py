# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Badge = Literal["new", "bestseller", "offer"]
ColorToken = Literal["frozen", "meat", "grocery"]
CategoryIcon = Literal["snowflake", "meat", "wheat"]
CouponType = Literal["percent", "fixed"]
OrderStatus = Literal["pending", "confirmed", "shipped", "delivered", "cancelled"]
PaymentMethod = Literal["cod", "card"]
SortKey = Literal["newest", "priceAsc", "priceDesc", "bestselling"]


# =====================================================
# CATALOG
# =====================================================
class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    color_token: ColorToken
    icon: CategoryIcon
    name_ar: str
    name_en: str


class WeightOption(BaseModel):
    """Package size of a product, priced relative to the product's base price."""

    model_config = ConfigDict(frozen=True)

    label_ar: str
    label_en: str
    grams: int = Field(..., gt=0)
    price_delta: Decimal = Decimal("0")


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    name_ar: str
    name_en: str
    desc_ar: str = ""
    desc_en: str = ""
    category_id: str
    price: Decimal = Field(..., ge=0)
    compare_at_price: Optional[Decimal] = None
    currency: str = "EGP"
    images: Tuple[str, ...] = ()
    sku: str
    weight_options: Tuple[WeightOption, ...] = Field(..., min_length=1)
    stock_qty: int = Field(0, ge=0)
    is_frozen: bool = False
    badges: Tuple[Badge, ...] = ()
    tags: Tuple[str, ...] = ()


class ProductQuery(BaseModel):
    """Listing filters; empty values mean no filtering."""

    search: str = ""
    category: str = "all"
    in_stock_only: bool = False
    frozen_only: bool = False
    sort: SortKey = "newest"


# =====================================================
# CART
# =====================================================
class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    weight_option_index: int = Field(..., ge=0)
    qty: int = Field(..., gt=0)


class Cart(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Tuple[CartItem, ...] = ()
    coupon_code: Optional[str] = None


class CartLine(BaseModel):
    """Cart item resolved against the current catalog."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    weight_option_index: int
    qty: int
    product: Product
    selected_weight: WeightOption
    item_price: Decimal
    line_total: Decimal


class CartTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    shipping: Decimal
    cold_chain: Decimal
    discount: Decimal
    total: Decimal
    has_frozen: bool
    is_free_shipping: bool


# =====================================================
# COUPONS
# =====================================================
class Coupon(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1)
    type: CouponType
    value: Decimal = Field(..., ge=0)
    active: bool = True
    min_subtotal: Decimal = Field(Decimal("0"), ge=0)


class CouponResult(BaseModel):
    success: bool
    message: str
    code: Optional[str] = None


# =====================================================
# ORDERS
# =====================================================
class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    email: str = ""


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    city: str


class Payment(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: PaymentMethod = "cod"
    paid: bool = False


class OrderItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name_ar: str
    product_name_en: str
    weight_option: WeightOption
    qty: int
    unit_price: Decimal
    total_price: Decimal


class OrderTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    shipping: Decimal
    cold_chain: Decimal
    discount: Decimal
    total: Decimal


class Order(BaseModel):
    """Order record. Items and totals are a snapshot taken at checkout."""

    model_config = ConfigDict(frozen=True)

    id: str
    number: str
    created_at: datetime
    status: OrderStatus = "pending"
    customer: Customer
    address: Address
    delivery_slot: str
    items: Tuple[OrderItem, ...]
    payment: Payment
    totals: OrderTotals


class DeliverySlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label_ar: str
    label_en: str


# =====================================================
# USERS
# =====================================================
class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str
    phone: Optional[str] = None
    is_admin: bool = False


# =====================================================
# API PAYLOADS
# =====================================================
class ItemIn(BaseModel):
    """Schema for adding a product to the cart."""

    product_id: str = Field(..., min_length=1)
    weight_option_index: int = Field(0, ge=0)
    qty: int = Field(1, gt=0, description="Quantity (must be > 0)")


class QtyIn(BaseModel):
    """Schema for changing a cart line; qty <= 0 removes the line."""

    product_id: str = Field(..., min_length=1)
    weight_option_index: int = Field(..., ge=0)
    qty: int


class CouponIn(BaseModel):
    code: str


class CheckoutIn(BaseModel):
    """Checkout form. Required fields are checked by the store so the
    customer gets a single message for all of them."""

    name: str = ""
    phone: str = ""
    email: str = ""
    street: str = ""
    city: str = ""
    delivery_slot: Optional[str] = None
    payment_method: PaymentMethod = "cod"


class StatusIn(BaseModel):
    status: OrderStatus


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class RegisterIn(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""


class CartOut(BaseModel):
    items: List[CartLine]
    coupon_code: Optional[str] = None
    applied_coupon: Optional[Coupon] = None
    totals: CartTotals


class CategoryOut(BaseModel):
    category: Category
    product_count: int


class ProductDetailOut(BaseModel):
    product: Product
    category: Optional[Category] = None
    related: List[Product]
