from __future__ import annotations
from typing import Any, Callable, Optional
import threading

from loguru import logger

from .queue import BoundedOrderQueue, Cancelled

class Worker:
    """
    Runs one producer or consumer loop on its own thread.

    Cancelled ends the loop quietly. Anything else is fatal: it is logged,
    kept in `error` for the caller to re-raise, and the queue is shut down so
    the peer loop cannot stay blocked on it.
    """
    def __init__(
        self,
        name: str,
        target: Callable[[], Any],
        queue: BoundedOrderQueue,
    ):
        self.name = name
        self.target = target
        self.queue = queue
        self.result: Any = None
        self.error: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def _run(self) -> None:
        try:
            self.result = self.target()
        except Cancelled:
            logger.info("{} cancelled, stopping", self.name)
        except Exception as exc:
            self.error = exc
            logger.exception("{} failed, shutting down {}", self.name, self.queue.name)
            self.queue.shutdown()
