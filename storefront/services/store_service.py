# storefront/services/store_service.py
import threading
from typing import Any, List, Optional, Sequence, Tuple

from storefront.data.seed import (
    CATEGORIES,
    DELIVERY_SLOTS,
    empty_cart,
    seed_coupons,
    seed_orders,
    seed_products,
)
from storefront.domain.schemas import (
    Address,
    Cart,
    CartLine,
    CartOut,
    CartTotals,
    Category,
    CheckoutIn,
    Coupon,
    CouponResult,
    Customer,
    DeliverySlot,
    Order,
    OrderStatus,
    Payment,
    Product,
    ProductQuery,
    User,
)
from storefront.services import (
    cart_service,
    catalog_service,
    coupon_service,
    order_service,
    user_service,
)
from storefront.services.persistence import SlotPersistence
from storefront.services.pricing import PricingRules, compute_totals, resolve_cart_lines
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StoreService:
    """
    Whole storefront state for one session, loaded from the slot store
    (or seed data) on construction.

    Queries return snapshots and derive cart lines/totals on every call.
    Commands build the new state next to the current one, flush the changed
    slots and only then swap them in, all under one lock, so a failed flush
    leaves both memory and storage as they were.
    """

    def __init__(
        self,
        persistence: SlotPersistence,
        rules: PricingRules = PricingRules(),
        categories: Sequence[Category] = CATEGORIES,
        delivery_slots: Sequence[DeliverySlot] = DELIVERY_SLOTS,
    ):
        self.persistence = persistence
        self.rules = rules
        self.categories: Tuple[Category, ...] = tuple(categories)
        self.delivery_slots: Tuple[DeliverySlot, ...] = tuple(delivery_slots)
        self._lock = threading.RLock()

        self._products: List[Product] = persistence.load("products", seed_products)
        self._cart: Cart = persistence.load("cart", empty_cart)
        self._orders: List[Order] = persistence.load("orders", seed_orders)
        self._coupons: List[Coupon] = persistence.load("coupons", seed_coupons)
        self._user: Optional[User] = persistence.load("user", lambda: None)

        logger.info(
            f"Store loaded: {len(self._products)} products, {len(self._orders)} orders, "
            f"{len(self._cart.items)} cart items"
        )

    def _commit(self, **slots: Any) -> None:
        self.persistence.save(**slots)
        for name, value in slots.items():
            setattr(self, f"_{name}", value)

    def _require_admin(self) -> None:
        if not self.is_admin:
            raise PermissionError("Admin access required")

    # =====================================================
    # SESSION
    # =====================================================
    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.is_admin

    def login(self, email: str, password: str) -> User:
        user = user_service.login(email, password)
        if user is None:
            raise ValueError("Invalid credentials")
        with self._lock:
            self._commit(user=user)
        logger.info(f"User {user.email} logged in (admin={user.is_admin})")
        return user

    def register(self, email: str, password: str, name: str) -> User:
        user = user_service.register(email, password, name)
        if user is None:
            raise ValueError("Please fill all required fields")
        with self._lock:
            self._commit(user=user)
        logger.info(f"User {user.email} registered")
        return user

    def logout(self) -> None:
        with self._lock:
            self._commit(user=None)

    # =====================================================
    # CATALOG
    # =====================================================
    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def get_category(self, category_id: str) -> Optional[Category]:
        return catalog_service.find_category(self.categories, category_id)

    def list_categories(self) -> List[Tuple[Category, int]]:
        products = self._products
        return [
            (c, len(catalog_service.products_by_category(products, c.id)))
            for c in self.categories
        ]

    def get_product(self, product_id: str) -> Optional[Product]:
        return catalog_service.find_product(self._products, product_id)

    def get_product_by_slug(self, slug: str) -> Optional[Product]:
        return catalog_service.find_product_by_slug(self._products, slug)

    def products_by_category(self, category_id: str) -> List[Product]:
        return catalog_service.products_by_category(self._products, category_id)

    def list_products(self, query: ProductQuery = ProductQuery()) -> List[Product]:
        return catalog_service.filter_products(self._products, query)

    def featured_products(self) -> List[Product]:
        return catalog_service.featured_products(self._products)

    def related_products(self, product: Product) -> List[Product]:
        return catalog_service.related_products(self._products, product)

    def add_product(self, product: Product) -> Product:
        with self._lock:
            self._require_admin()
            self._commit(products=catalog_service.add_product(self._products, product))
        logger.info(f"Product {product.id} added")
        return product

    def update_product(self, product: Product) -> Product:
        with self._lock:
            self._require_admin()
            self._commit(products=catalog_service.replace_product(self._products, product))
        logger.info(f"Product {product.id} updated")
        return product

    def delete_product(self, product_id: str) -> None:
        with self._lock:
            self._require_admin()
            self._commit(products=catalog_service.remove_product(self._products, product_id))
        logger.info(f"Product {product_id} deleted")

    # =====================================================
    # CART
    # =====================================================
    @property
    def cart(self) -> Cart:
        return self._cart

    def cart_lines(self) -> List[CartLine]:
        return resolve_cart_lines(self._cart, self._products)

    def applied_coupon(self) -> Optional[Coupon]:
        return coupon_service.resolve_applied_coupon(self._cart.coupon_code, self._coupons)

    def cart_totals(self) -> CartTotals:
        return compute_totals(self.cart_lines(), self.applied_coupon(), self.rules)

    def cart_view(self) -> CartOut:
        with self._lock:
            lines = self.cart_lines()
            coupon = self.applied_coupon()
            return CartOut(
                items=lines,
                coupon_code=self._cart.coupon_code,
                applied_coupon=coupon,
                totals=compute_totals(lines, coupon, self.rules),
            )

    def add_to_cart(self, product_id: str, weight_option_index: int, qty: int) -> Cart:
        with self._lock:
            cart = cart_service.add_item(
                self._cart, self.get_product(product_id), weight_option_index, qty
            )
            self._commit(cart=cart)
        logger.info(f"Added {qty} x {product_id} (weight {weight_option_index}) to cart")
        return cart

    def update_cart_item_qty(self, product_id: str, weight_option_index: int, qty: int) -> Cart:
        with self._lock:
            cart = cart_service.set_item_qty(self._cart, product_id, weight_option_index, qty)
            self._commit(cart=cart)
        return cart

    def remove_from_cart(self, product_id: str, weight_option_index: int) -> Cart:
        with self._lock:
            cart = cart_service.remove_item(self._cart, product_id, weight_option_index)
            self._commit(cart=cart)
        logger.info(f"Removed {product_id} (weight {weight_option_index}) from cart")
        return cart

    def clear_cart(self) -> Cart:
        with self._lock:
            self._commit(cart=empty_cart())
        return self._cart

    # =====================================================
    # COUPONS
    # =====================================================
    @property
    def coupons(self) -> List[Coupon]:
        return list(self._coupons)

    def apply_coupon(self, code: str) -> CouponResult:
        with self._lock:
            subtotal = self.cart_totals().subtotal
            result = coupon_service.validate_coupon(code, self._coupons, subtotal)
            if result.success:
                self._commit(cart=cart_service.with_coupon(self._cart, result.code))

        logger.info(f"Coupon {code!r}: {result.message}")
        return result

    def remove_coupon(self) -> Cart:
        with self._lock:
            self._commit(cart=cart_service.with_coupon(self._cart, None))
        return self._cart

    def add_coupon(self, coupon: Coupon) -> Coupon:
        with self._lock:
            self._require_admin()
            self._commit(coupons=coupon_service.add_coupon(self._coupons, coupon))
        return coupon

    def update_coupon(self, coupon: Coupon) -> Coupon:
        with self._lock:
            self._require_admin()
            self._commit(coupons=coupon_service.update_coupon(self._coupons, coupon))
        return coupon

    def delete_coupon(self, code: str) -> None:
        with self._lock:
            self._require_admin()
            self._commit(coupons=coupon_service.delete_coupon(self._coupons, code))

    # =====================================================
    # ORDERS
    # =====================================================
    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    def get_order(self, order_id: str) -> Optional[Order]:
        return order_service.find_order(self._orders, order_id)

    def list_orders(self) -> List[Order]:
        if self._user is None:
            raise PermissionError("Login to view your orders")
        return list(self._orders)

    def create_order(
        self,
        customer: Customer,
        address: Address,
        delivery_slot: str,
        payment: Payment,
    ) -> Order:
        """
        Snapshot the cart into an order, take the ordered quantities off
        stock and clear the cart.

        Products, orders and cart are written to storage in one batch; if
        that fails nothing changes.
        """
        with self._lock:
            lines = self.cart_lines()
            totals = compute_totals(lines, self.applied_coupon(), self.rules)

            order = order_service.build_order(
                lines,
                totals,
                self._orders,
                customer=customer,
                address=address,
                delivery_slot=delivery_slot,
                payment=payment,
            )

            self._commit(
                products=order_service.decrement_stock(self._products, lines),
                orders=[order, *self._orders],
                cart=empty_cart(),
            )

        logger.info(f"Order {order.number} ({order.id}) created, total {order.totals.total}")
        return order

    def place_order(self, checkout: CheckoutIn) -> Order:
        """Checkout form submit: validate, then create the order."""
        with self._lock:
            if not self.cart_lines():
                raise ValueError("Your cart is empty")

            required = (checkout.name, checkout.phone, checkout.street, checkout.city)
            if not all(value.strip() for value in required):
                raise ValueError("Please fill all required fields")

            slot = checkout.delivery_slot or self.delivery_slots[0].value
            if slot not in {s.value for s in self.delivery_slots}:
                raise ValueError(f"Unknown delivery slot {slot}")

            return self.create_order(
                customer=Customer(
                    name=checkout.name.strip(),
                    phone=checkout.phone.strip(),
                    email=checkout.email.strip(),
                ),
                address=Address(street=checkout.street.strip(), city=checkout.city.strip()),
                delivery_slot=slot,
                # demo: card payments count as paid
                payment=Payment(
                    method=checkout.payment_method,
                    paid=checkout.payment_method == "card",
                ),
            )

    def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        with self._lock:
            self._require_admin()
            self._commit(orders=order_service.set_status(self._orders, order_id, status))
            order = self.get_order(order_id)
        logger.info(f"Order {order_id} status -> {status}")
        return order
