from __future__ import annotations
from typing import Callable, List
import time

from loguru import logger

from ordersim.engine.order import Order
from ordersim.engine.queue import BoundedOrderQueue, Cancelled
from ordersim.engine.metrics import Metrics

class FulfillmentSink:
    def __init__(
        self,
        name: str,
        *,
        target_count: int,
        base_latency_ms: float = 100.0,
        per_unit_latency_ms: float = 20.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if target_count <= 0:
            raise ValueError(f"target_count must be positive, got {target_count}")
        self.name = name
        self.target_count = target_count
        self.base_latency_ms = base_latency_ms
        self.per_unit_latency_ms = per_unit_latency_ms
        self.sleep = sleep
        self.processed_ids: List[int] = []

    def processing_ms(self, order: Order) -> float:
        return self.base_latency_ms + order.quantity * self.per_unit_latency_ms

    def fulfill(self, order: Order) -> None:
        # stand-in for picking and packing
        self.sleep(self.processing_ms(order) / 1000)

    def consume(self, in_q: BoundedOrderQueue[Order], metrics: Metrics) -> int:
        """Drain in_q until target_count orders are fulfilled, then shut it down."""
        while True:
            try:
                order = in_q.dequeue()
            except Cancelled:
                logger.info("{} stopped: {} was shut down", self.name, in_q.name)
                metrics.inc(f"{self.name}.cancelled", 1)
                return in_q.fulfilled

            metrics.inc(f"{self.name}.in", 1)
            metrics.observe_queue_wait_ms((time.time() - order.created_ts) * 1000)
            logger.info("consumer starting order {}, expecting {:.0f}ms", order.id, self.processing_ms(order))
            t0 = time.time()
            self.fulfill(order)
            metrics.observe_processing_ms((time.time() - t0) * 1000)

            self.processed_ids.append(order.id)
            filled = in_q.mark_fulfilled()
            metrics.inc(f"{self.name}.fulfilled", 1)
            logger.info("consumer fulfilled order {} - fulfilled: {}", order.id, filled)

            if filled >= self.target_count:
                logger.info("consumer is finished after {} orders", filled)
                in_q.shutdown()
                return filled
