from unittest.mock import MagicMock

import pytest
from redis.exceptions import RedisError

from storefront.data.seed import COUPONS, PRODUCTS
from storefront.domain.schemas import Cart, CartItem
from storefront.repos.slot_repo import RedisSlotRepo, SlotStorageError, SqlSlotRepo
from storefront.services.persistence import SlotPersistence
from storefront.services.store_service import StoreService

from conftest import RULES


def test_empty_storage_falls_back_to_seed(persistence):
    store = StoreService(persistence)

    assert len(store.products) == len(PRODUCTS)
    assert [c.code for c in store.coupons] == [c.code for c in COUPONS]
    assert store.cart.items == ()
    assert store.orders == []
    assert store.current_user is None


def test_corrupted_slot_falls_back_to_seed(persistence):
    persistence.repo.put_many({
        persistence.key("products"): "{not json",
        persistence.key("cart"): '{"items": [{"product_id": "x", "weight_option_index": 0, "qty": -4}]}',
    })

    store = StoreService(persistence)

    assert len(store.products) == len(PRODUCTS)
    assert store.cart == Cart()


def test_unreadable_storage_falls_back_to_seed():
    repo = MagicMock()
    repo.get.side_effect = SlotStorageError("gone")

    store = StoreService(SlotPersistence(repo))

    assert len(store.products) == len(PRODUCTS)


def test_state_survives_reload(store, persistence):
    store.add_to_cart("rice", 0, 2)
    store.apply_coupon("TEN")
    store.login("mona@example.com", "secret")

    reloaded = StoreService(persistence, rules=RULES)

    assert reloaded.cart == store.cart
    assert reloaded.current_user == store.current_user
    assert reloaded.cart_totals() == store.cart_totals()


def test_each_mutation_flushes_its_slot(store, persistence):
    store.add_to_cart("rice", 0, 1)

    raw = persistence.repo.get(persistence.key("cart"))
    assert '"product_id":"rice"' in raw


def test_sql_repo_overwrites_whole_slot():
    repo = SqlSlotRepo.from_url("sqlite://")

    repo.put_many({"a": "1", "b": "2"})
    repo.put_many({"a": "3"})

    assert repo.get("a") == "3"
    assert repo.get("b") == "2"
    assert repo.get("missing") is None


def test_redis_repo_writes_in_one_pipeline():
    client = MagicMock()
    pipe = client.pipeline.return_value
    repo = RedisSlotRepo(client)

    repo.put_many({"kawther-cart": "{}", "kawther-orders": "[]"})

    client.pipeline.assert_called_once_with(transaction=True)
    pipe.set.assert_any_call("kawther-cart", "{}")
    pipe.set.assert_any_call("kawther-orders", "[]")
    pipe.execute.assert_called_once()


def test_redis_repo_reads_and_wraps_errors():
    client = MagicMock()
    client.get.return_value = b'{"items": []}'
    repo = RedisSlotRepo(client)

    assert repo.get("kawther-cart") == '{"items": []}'

    client.get.side_effect = RedisError("down")
    with pytest.raises(SlotStorageError):
        repo.get("kawther-cart")
    assert client.get.call_count == 4


def test_persistence_round_trip_through_redis_repo():
    storage = {}
    client = MagicMock()
    client.get.side_effect = storage.get
    client.pipeline.return_value.set.side_effect = lambda k, v: storage.__setitem__(k, v)
    persistence = SlotPersistence(RedisSlotRepo(client))

    cart = Cart(items=(CartItem(product_id="rice", weight_option_index=0, qty=2),))
    persistence.save(cart=cart)

    assert persistence.key("cart") in storage
    assert persistence.load("cart", Cart) == cart


def test_undecodable_redis_slot_falls_back_to_seed():
    """Bytes that are not UTF-8 count as a corrupted slot"""
    client = MagicMock()
    client.get.return_value = b"\xff\xfe garbage"
    repo = RedisSlotRepo(client)

    with pytest.raises(SlotStorageError):
        repo.get("kawther-products")

    store = StoreService(SlotPersistence(repo))
    assert len(store.products) == len(PRODUCTS)
    assert store.cart == Cart()
