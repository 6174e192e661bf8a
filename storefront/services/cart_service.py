# storefront/services/cart_service.py
from typing import Optional

from storefront.domain.schemas import Cart, CartItem, Product


def _same_line(item: CartItem, product_id: str, weight_option_index: int) -> bool:
    return item.product_id == product_id and item.weight_option_index == weight_option_index


def add_item(cart: Cart, product: Optional[Product], weight_option_index: int, qty: int) -> Cart:
    """Return a cart with qty more of (product, weight option).

    An existing line for the same weight option is increased instead of
    adding a second one.
    """
    if product is None:
        raise LookupError("Product not found")

    if qty <= 0:
        raise ValueError("Quantity must be greater than 0")

    if not 0 <= weight_option_index < len(product.weight_options):
        raise ValueError(f"Invalid weight option {weight_option_index} for {product.id}")

    items = list(cart.items)
    for i, item in enumerate(items):
        if _same_line(item, product.id, weight_option_index):
            items[i] = item.model_copy(update={"qty": item.qty + qty})
            break
    else:
        items.append(
            CartItem(product_id=product.id, weight_option_index=weight_option_index, qty=qty)
        )

    return cart.model_copy(update={"items": tuple(items)})


def set_item_qty(cart: Cart, product_id: str, weight_option_index: int, qty: int) -> Cart:
    if qty <= 0:
        return remove_item(cart, product_id, weight_option_index)

    items = tuple(
        item.model_copy(update={"qty": qty})
        if _same_line(item, product_id, weight_option_index)
        else item
        for item in cart.items
    )
    return cart.model_copy(update={"items": items})


def remove_item(cart: Cart, product_id: str, weight_option_index: int) -> Cart:
    items = tuple(
        item for item in cart.items
        if not _same_line(item, product_id, weight_option_index)
    )
    return cart.model_copy(update={"items": items})


def with_coupon(cart: Cart, code: Optional[str]) -> Cart:
    return cart.model_copy(update={"coupon_code": code})
