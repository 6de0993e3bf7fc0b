from __future__ import annotations
from collections import deque
from typing import Deque, Generic, TypeVar
import threading

from loguru import logger

T = TypeVar("T")

class Cancelled(RuntimeError):
    """Raised by enqueue/dequeue once the queue has been shut down."""

class BoundedOrderQueue(Generic[T]):
    """
    Fixed-capacity FIFO handoff between one producer and one consumer.

    enqueue() blocks while full, dequeue() blocks while empty. Both wait on a
    condition bound to the same lock, so a suspended caller holds no lock and
    burns no CPU until the complementary operation (or shutdown) notifies it.
    Every field below is read and written only while holding self._lock.
    """
    def __init__(self, name: str = "orders", capacity: int = 3):
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self.name = name
        self._capacity = capacity
        self._buf: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)
        self._cancelled = False
        self._fulfilled = 0
        self._enqueued = 0
        self._dequeued = 0
        self._peak_depth = 0
        self._put_waiters = 0
        self._get_waiters = 0
        self._put_wakeups = 0
        self._get_wakeups = 0

    def enqueue(self, item: T) -> None:
        with self._lock:
            while not self._cancelled and len(self._buf) >= self._capacity:
                logger.debug("{} at capacity ({}), producer waiting", self.name, self._capacity)
                self._put_waiters += 1
                try:
                    self._not_full.wait()
                finally:
                    self._put_waiters -= 1
                self._put_wakeups += 1
            if self._cancelled:
                raise Cancelled(f"{self.name} is shut down")
            self._buf.append(item)
            self._enqueued += 1
            self._peak_depth = max(self._peak_depth, len(self._buf))
            self._not_empty.notify()

    def dequeue(self) -> T:
        with self._lock:
            while not self._cancelled and not self._buf:
                logger.debug("{} empty, consumer waiting", self.name)
                self._get_waiters += 1
                try:
                    self._not_empty.wait()
                finally:
                    self._get_waiters -= 1
                self._get_wakeups += 1
            # Buffered items stay deliverable after shutdown; only a drained queue fails.
            if not self._buf:
                raise Cancelled(f"{self.name} is shut down")
            item = self._buf.popleft()
            self._dequeued += 1
            self._not_full.notify()
            return item

    def shutdown(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            logger.info("{} shutting down", self.name)
            self._not_full.notify_all()
            self._not_empty.notify_all()

    def mark_fulfilled(self) -> int:
        with self._lock:
            self._fulfilled += 1
            return self._fulfilled

    def qsize(self) -> int:
        with self._lock:
            return len(self._buf)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    @property
    def fulfilled(self) -> int:
        with self._lock:
            return self._fulfilled

    def stats(self) -> dict:
        with self._lock:
            return {
                "depth": len(self._buf),
                "peak_depth": self._peak_depth,
                "enqueued": self._enqueued,
                "dequeued": self._dequeued,
                "fulfilled": self._fulfilled,
                "cancelled": self._cancelled,
                "put_waiters": self._put_waiters,
                "get_waiters": self._get_waiters,
                "put_wakeups": self._put_wakeups,
                "get_wakeups": self._get_wakeups,
            }
