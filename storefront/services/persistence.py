# storefront/services/persistence.py
from typing import Any, Callable, Dict, List, Optional, Protocol

from pydantic import TypeAdapter

from storefront.domain.schemas import Cart, Coupon, Order, Product, User
from storefront.repos.slot_repo import SlotStorageError
from storefront.utils.logging import get_logger
from storefront.utils.settings import STORAGE_PREFIX

logger = get_logger(__name__)

SLOT_TYPES: Dict[str, TypeAdapter] = {
    "products": TypeAdapter(List[Product]),
    "cart": TypeAdapter(Cart),
    "orders": TypeAdapter(List[Order]),
    "coupons": TypeAdapter(List[Coupon]),
    "user": TypeAdapter(Optional[User]),
}


class SlotRepo(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def put_many(self, payloads: Dict[str, str]) -> None: ...


class SlotPersistence:
    """
    Full-snapshot-per-slot persistence.

    Every save serializes whole collections; load falls back to the given
    default when a slot is missing, unreadable or does not validate.
    """

    def __init__(self, repo: SlotRepo, prefix: str = STORAGE_PREFIX):
        self.repo = repo
        self.prefix = prefix

    def key(self, slot: str) -> str:
        return f"{self.prefix}{slot}"

    def load(self, slot: str, fallback: Callable[[], Any]) -> Any:
        adapter = SLOT_TYPES[slot]
        key = self.key(slot)

        try:
            raw = self.repo.get(key)
        except SlotStorageError as e:
            logger.warning(f"Slot {key} unreadable, using defaults: {e}")
            return fallback()

        if raw is None:
            logger.info(f"Slot {key} empty, using defaults")
            return fallback()

        try:
            return adapter.validate_json(raw)
        except ValueError as e:
            # pydantic ValidationError is a ValueError
            logger.warning(f"Slot {key} corrupted, using defaults: {e}")
            return fallback()

    def save(self, **slots: Any) -> None:
        payloads = {
            self.key(slot): SLOT_TYPES[slot].dump_json(value).decode("utf-8")
            for slot, value in slots.items()
        }
        try:
            self.repo.put_many(payloads)
        except SlotStorageError:
            logger.error(f"Flush of slots {sorted(slots)} failed")
            raise
