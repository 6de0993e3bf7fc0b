from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List
import time
import uuid

from loguru import logger

from .config import SimulationConfig
from .metrics import Metrics
from .order import Order
from .queue import BoundedOrderQueue
from .worker import Worker
from ordersim.stages.ingest import OrdersIngest
from ordersim.stages.sink import FulfillmentSink

@dataclass
class RunSummary:
    run_id: str
    name: str
    created_ts: float
    fulfilled: int
    processed_ids: List[int]
    final_depth: int
    metrics: Dict[str, Any]
    config_snapshot: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "run_id": self.run_id,
            "name": self.name,
            "created_ts": self.created_ts,
            "fulfilled": self.fulfilled,
            "processed_ids": list(self.processed_ids),
            "final_depth": self.final_depth,
            "metrics": self.metrics,
            "config_snapshot": self.config_snapshot,
        }

@dataclass
class Simulation:
    config: SimulationConfig
    sleep: Callable[[float], None] = time.sleep

    def run(self) -> RunSummary:
        cfg = self.config
        metrics = Metrics()
        run_id = time.strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]
        q: BoundedOrderQueue[Order] = BoundedOrderQueue(name=cfg.name, capacity=cfg.capacity)

        source = OrdersIngest(
            "producer",
            item_kinds=cfg.item_kinds,
            max_quantity=cfg.max_quantity,
            rng_seed=cfg.rng_seed,
        )
        sink = FulfillmentSink(
            "consumer",
            target_count=cfg.target_count,
            base_latency_ms=cfg.base_latency_ms,
            per_unit_latency_ms=cfg.per_unit_latency_ms,
            sleep=self.sleep,
        )

        consumer = Worker("consumer", lambda: sink.consume(q, metrics), q)
        producer = Worker("producer", lambda: source.emit(cfg.target_count, q, metrics), q)

        logger.info("run {}: capacity={} target_count={}", run_id, cfg.capacity, cfg.target_count)
        consumer.start()
        producer.start()
        producer.join()
        consumer.join()

        for w in (producer, consumer):
            if w.error is not None:
                metrics.inc("simulation.hard_fail", 1)
                raise w.error

        metrics.finalize()
        fulfilled = q.fulfilled
        logger.info("run {} finished: fulfilled {} of {}", run_id, fulfilled, cfg.target_count)
        return RunSummary(
            run_id=run_id,
            name=cfg.name,
            created_ts=time.time(),
            fulfilled=fulfilled,
            processed_ids=list(sink.processed_ids),
            final_depth=q.qsize(),
            metrics=metrics.summary(),
            config_snapshot=cfg.to_dict(),
        )
