# storefront/services/order_service.py
import re
import uuid
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Sequence

from storefront.domain.schemas import (
    Address,
    CartLine,
    CartTotals,
    Customer,
    Order,
    OrderItem,
    OrderStatus,
    OrderTotals,
    Payment,
    Product,
)
from storefront.utils.settings import ORDER_NUMBER_PREFIX

_NUMBER_RE = re.compile(r"(\d+)$")


def new_order_id() -> str:
    return f"order-{uuid.uuid4().hex}"


def next_order_number(orders: Iterable[Order], prefix: str = ORDER_NUMBER_PREFIX) -> str:
    """One above the highest sequence found in existing order numbers."""
    highest = 0
    for order in orders:
        match = _NUMBER_RE.search(order.number)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}{highest + 1:08d}"


def snapshot_items(lines: Iterable[CartLine]) -> tuple:
    return tuple(
        OrderItem(
            product_id=line.product_id,
            product_name_ar=line.product.name_ar,
            product_name_en=line.product.name_en,
            weight_option=line.selected_weight,
            qty=line.qty,
            unit_price=line.item_price,
            total_price=line.line_total,
        )
        for line in lines
    )


def snapshot_totals(totals: CartTotals) -> OrderTotals:
    return OrderTotals(
        subtotal=totals.subtotal,
        shipping=totals.shipping,
        cold_chain=totals.cold_chain,
        discount=totals.discount,
        total=totals.total,
    )


def build_order(
    lines: Sequence[CartLine],
    totals: CartTotals,
    existing_orders: Sequence[Order],
    customer: Customer,
    address: Address,
    delivery_slot: str,
    payment: Payment,
    clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
) -> Order:
    """
    Snapshot the cart into a new pending order.

    Does not look at whether the cart is empty, an empty cart gives an
    order with no items.
    """
    return Order(
        id=new_order_id(),
        number=next_order_number(existing_orders),
        created_at=clock(),
        status="pending",
        customer=customer,
        address=address,
        delivery_slot=delivery_slot,
        items=snapshot_items(lines),
        payment=payment,
        totals=snapshot_totals(totals),
    )


def decrement_stock(products: Sequence[Product], lines: Iterable[CartLine]) -> List[Product]:
    """Products with ordered quantities taken off stock, never below 0."""
    ordered = {}
    for line in lines:
        ordered[line.product_id] = ordered.get(line.product_id, 0) + line.qty

    return [
        p.model_copy(update={"stock_qty": max(0, p.stock_qty - ordered[p.id])})
        if p.id in ordered
        else p
        for p in products
    ]


def find_order(orders: Iterable[Order], order_id: str) -> Order | None:
    return next((o for o in orders if o.id == order_id), None)


def set_status(orders: Sequence[Order], order_id: str, status: OrderStatus) -> List[Order]:
    if find_order(orders, order_id) is None:
        raise LookupError("Order not found")
    return [o.model_copy(update={"status": status}) if o.id == order_id else o for o in orders]
