# storefront/services/coupon_service.py
from decimal import Decimal
from typing import Iterable, List, Optional

from storefront.domain.schemas import Coupon, CouponResult
from storefront.utils.settings import CURRENCY


def find_active_coupon(code: str, coupons: Iterable[Coupon]) -> Optional[Coupon]:
    wanted = code.strip().upper()
    return next(
        (c for c in coupons if c.active and c.code.upper() == wanted),
        None,
    )


def validate_coupon(code: str, coupons: Iterable[Coupon], subtotal: Decimal) -> CouponResult:
    coupon = find_active_coupon(code, coupons)

    if coupon is None:
        return CouponResult(success=False, message="Invalid coupon code")

    if subtotal < coupon.min_subtotal:
        return CouponResult(
            success=False,
            message=f"Minimum order {coupon.min_subtotal} {CURRENCY} required",
        )

    return CouponResult(success=True, message="Coupon applied!", code=coupon.code)


def resolve_applied_coupon(code: Optional[str], coupons: Iterable[Coupon]) -> Optional[Coupon]:
    """Coupon stored on the cart, if it still exists and is active."""
    if not code:
        return None
    return next((c for c in coupons if c.active and c.code == code), None)


# admin
def add_coupon(coupons: List[Coupon], coupon: Coupon) -> List[Coupon]:
    if any(c.code.upper() == coupon.code.upper() for c in coupons):
        raise ValueError(f"Coupon {coupon.code} already exists")
    return [*coupons, coupon]


def update_coupon(coupons: List[Coupon], coupon: Coupon) -> List[Coupon]:
    if not any(c.code == coupon.code for c in coupons):
        raise LookupError(f"Coupon {coupon.code} not found")
    return [coupon if c.code == coupon.code else c for c in coupons]


def delete_coupon(coupons: List[Coupon], code: str) -> List[Coupon]:
    remaining = [c for c in coupons if c.code != code]
    if len(remaining) == len(coupons):
        raise LookupError(f"Coupon {code} not found")
    return remaining
