import dataclasses

import pytest

from ordersim.engine.order import Order, new_order


def test_order_is_immutable():
    order = new_order(1, "hiking", 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.quantity = 10


def test_order_rejects_bad_values():
    with pytest.raises(ValueError):
        Order(id=0, kind="hiking", quantity=1)
    with pytest.raises(ValueError):
        Order(id=1, kind="hiking", quantity=-1)


def test_orders_compare_by_content_not_timestamp():
    a = Order(id=3, kind="running", quantity=2, created_ts=1.0)
    b = Order(id=3, kind="running", quantity=2, created_ts=2.0)
    assert a == b


@pytest.mark.parametrize("kind", ["", None, 3])
def test_order_rejects_bad_kind(kind):
    with pytest.raises(ValueError):
        Order(id=1, kind=kind, quantity=1)
