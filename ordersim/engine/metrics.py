from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List
import statistics
import threading
import time

@dataclass
class Metrics:
    counters: Dict[str, int] = field(default_factory=dict)
    processing_ms: List[float] = field(default_factory=list)
    queue_wait_ms: List[float] = field(default_factory=list)
    queue_depth_samples: List[dict] = field(default_factory=list)
    started_ts: float = field(default_factory=time.time)
    finished_ts: float | None = None
    # producer and consumer threads both write here
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def inc(self, key: str, n: int = 1) -> None:
        with self._lock:
            self.counters[key] = self.counters.get(key, 0) + n

    def observe_processing_ms(self, ms: float) -> None:
        with self._lock:
            self.processing_ms.append(ms)

    def observe_queue_wait_ms(self, ms: float) -> None:
        with self._lock:
            self.queue_wait_ms.append(ms)

    def sample_queue_depth(self, depths: dict) -> None:
        depths = dict(depths)
        depths["_ts"] = time.time()
        with self._lock:
            self.queue_depth_samples.append(depths)

    def finalize(self) -> None:
        with self._lock:
            self.finished_ts = time.time()

    def summary(self) -> dict:
        with self._lock:
            dur = (self.finished_ts or time.time()) - self.started_ts
            return {
                "duration_s": dur,
                "counters": dict(self.counters),
                "processing_ms": _latency_summary(self.processing_ms),
                "queue_wait_ms": _latency_summary(self.queue_wait_ms),
                "queue_depth_samples": list(self.queue_depth_samples),
            }

def _latency_summary(samples: List[float]) -> dict:
    lats = sorted(samples)
    def pct(p: float) -> float | None:
        if not lats:
            return None
        idx = int(round((p/100) * (len(lats)-1)))
        return lats[idx]

    return {
        "count": len(lats),
        "p50": pct(50),
        "p95": pct(95),
        "mean": (statistics.mean(lats) if lats else None),
    }
