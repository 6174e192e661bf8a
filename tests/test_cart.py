import pytest


def test_add_merges_same_weight_option(store):
    """Adding the same product and weight twice bumps qty on one line"""
    store.add_to_cart("rice", 0, 1)
    store.add_to_cart("rice", 0, 2)

    assert len(store.cart.items) == 1
    assert store.cart.items[0].qty == 3


def test_different_weight_options_are_separate_lines(store):
    store.add_to_cart("chicken", 0, 1)
    store.add_to_cart("chicken", 1, 1)

    keys = [(i.product_id, i.weight_option_index) for i in store.cart.items]
    assert keys == [("chicken", 0), ("chicken", 1)]


def test_update_qty_to_zero_removes_line(store):
    store.add_to_cart("rice", 0, 2)
    store.add_to_cart("chicken", 0, 1)

    store.update_cart_item_qty("rice", 0, 5)
    assert store.cart.items[0].qty == 5

    store.update_cart_item_qty("rice", 0, 0)
    assert [i.product_id for i in store.cart.items] == ["chicken"]


def test_remove_and_clear(store):
    store.add_to_cart("rice", 0, 2)
    store.add_to_cart("chicken", 1, 1)

    store.remove_from_cart("rice", 0)
    assert [i.product_id for i in store.cart.items] == ["chicken"]

    store.clear_cart()
    assert store.cart.items == ()
    assert store.cart_totals().subtotal == 0


def test_add_unknown_product_is_lookup_miss(store):
    with pytest.raises(LookupError):
        store.add_to_cart("nope", 0, 1)
    assert store.cart.items == ()


@pytest.mark.parametrize("index, qty", [(2, 1), (-1, 1), (0, 0), (0, -3)])
def test_add_rejects_bad_weight_or_qty(store, index, qty):
    with pytest.raises(ValueError):
        store.add_to_cart("chicken", index, qty)
    assert store.cart.items == ()


def test_deleted_product_disappears_from_cart_lines(admin_store):
    """Cart keeps the item, but lines and totals skip the missing product"""
    admin_store.add_to_cart("rice", 0, 1)
    admin_store.add_to_cart("chicken", 0, 1)

    admin_store.delete_product("rice")

    assert len(admin_store.cart.items) == 2
    assert [line.product_id for line in admin_store.cart_lines()] == ["chicken"]
    assert admin_store.cart_totals().subtotal == 100


def test_cart_lines_follow_price_changes(admin_store):
    """Cart prices are read from the catalog every time"""
    admin_store.add_to_cart("rice", 0, 2)
    rice = admin_store.get_product("rice")

    admin_store.update_product(rice.model_copy(update={"price": 300}))

    assert admin_store.cart_totals().subtotal == 600
