from __future__ import annotations
from typing import Sequence
import random

from loguru import logger

from ordersim.engine.order import DEFAULT_ITEM_KINDS, Order, new_order
from ordersim.engine.queue import BoundedOrderQueue, Cancelled
from ordersim.engine.metrics import Metrics

class OrdersIngest:
    def __init__(
        self,
        name: str,
        *,
        item_kinds: Sequence[str] = DEFAULT_ITEM_KINDS,
        max_quantity: int = 100,
        rng_seed: int | None = None,
    ):
        if not item_kinds:
            raise ValueError("item_kinds must name at least one kind")
        self.name = name
        self.item_kinds = tuple(item_kinds)
        self.max_quantity = max_quantity
        self.rng = random.Random(rng_seed)
        self._next_id = 1

    def next_order(self) -> Order:
        order = new_order(
            self._next_id,
            self.rng.choice(self.item_kinds),
            self.rng.randrange(0, self.max_quantity),
        )
        self._next_id += 1
        return order

    def emit(self, n: int, out_q: BoundedOrderQueue[Order], metrics: Metrics) -> int:
        """Enqueue n fresh orders in id order. Returns how many were accepted."""
        sent = 0
        for _ in range(n):
            order = self.next_order()
            try:
                out_q.enqueue(order)
            except Cancelled:
                logger.info("{} stopped after {} orders: {} was shut down", self.name, sent, out_q.name)
                metrics.inc(f"{self.name}.cancelled", 1)
                return sent
            sent += 1
            depth = out_q.qsize()
            logger.info("producer added order {} ({} x{}) - size: {}", order.id, order.kind, order.quantity, depth)
            metrics.inc(f"{self.name}.out", 1)
            metrics.sample_queue_depth({out_q.name: depth})
        return sent
