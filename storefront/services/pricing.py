# storefront/services/pricing.py
"""
Cart pricing.

Pure functions over cart + catalog state. Nothing here is cached or
mutated, so totals can be recomputed on every read.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from storefront.domain.schemas import Cart, CartLine, CartTotals, Coupon, Product
from storefront.utils.settings import COLD_CHAIN_FEE, FREE_SHIPPING_THRESHOLD, SHIPPING_FEE

ZERO = Decimal("0")


@dataclass(frozen=True)
class PricingRules:
    shipping_fee: Decimal = SHIPPING_FEE
    free_shipping_threshold: Decimal = FREE_SHIPPING_THRESHOLD
    cold_chain_fee: Decimal = COLD_CHAIN_FEE


def resolve_cart_lines(cart: Cart, products: Iterable[Product]) -> List[CartLine]:
    """Resolve cart items against the catalog.

    Items pointing at a deleted product or at a weight option the product
    no longer has are dropped.
    """
    by_id = {p.id: p for p in products}
    lines = []

    for item in cart.items:
        product = by_id.get(item.product_id)
        if product is None:
            continue
        if not 0 <= item.weight_option_index < len(product.weight_options):
            continue

        weight = product.weight_options[item.weight_option_index]
        item_price = product.price + weight.price_delta
        lines.append(
            CartLine(
                product_id=item.product_id,
                weight_option_index=item.weight_option_index,
                qty=item.qty,
                product=product,
                selected_weight=weight,
                item_price=item_price,
                line_total=item_price * item.qty,
            )
        )

    return lines


def coupon_discount(coupon: Optional[Coupon], subtotal: Decimal) -> Decimal:
    if coupon is None or subtotal < coupon.min_subtotal:
        return ZERO

    if coupon.type == "percent":
        return (subtotal * coupon.value / 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    # fixed amounts are not capped to the subtotal
    return coupon.value


def compute_totals(
    lines: Iterable[CartLine],
    coupon: Optional[Coupon] = None,
    rules: PricingRules = PricingRules(),
) -> CartTotals:
    lines = list(lines)

    subtotal = sum((line.line_total for line in lines), ZERO)
    has_frozen = any(line.product.is_frozen for line in lines)
    is_free_shipping = subtotal >= rules.free_shipping_threshold

    shipping = ZERO if is_free_shipping else rules.shipping_fee
    cold_chain = rules.cold_chain_fee if has_frozen else ZERO
    discount = coupon_discount(coupon, subtotal)

    return CartTotals(
        subtotal=subtotal,
        shipping=shipping,
        cold_chain=cold_chain,
        discount=discount,
        total=subtotal + shipping + cold_chain - discount,
        has_frozen=has_frozen,
        is_free_shipping=is_free_shipping,
    )
