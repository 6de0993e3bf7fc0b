from __future__ import annotations
from dataclasses import dataclass, field
import time

DEFAULT_ITEM_KINDS = ("hiking", "sneakers", "running")

@dataclass(frozen=True)
class Order:
    id: int
    kind: str
    quantity: int
    created_ts: float = field(default_factory=time.time, compare=False)

    def __post_init__(self) -> None:
        if self.id < 1:
            raise ValueError(f"Order id must be >= 1, got {self.id}")
        if not isinstance(self.kind, str) or not self.kind:
            raise ValueError(f"Order kind must be a non-empty label, got {self.kind!r}")
        if self.quantity < 0:
            raise ValueError(f"Order quantity must be >= 0, got {self.quantity}")

def new_order(order_id: int, kind: str, quantity: int) -> Order:
    return Order(id=order_id, kind=kind, quantity=quantity)
