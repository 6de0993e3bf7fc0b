from __future__ import annotations
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

import yaml

from .order import DEFAULT_ITEM_KINDS

@dataclass(frozen=True)
class SimulationConfig:
    name: str = "warehouse"
    capacity: int = 3
    target_count: int = 15
    item_kinds: Tuple[str, ...] = field(default=DEFAULT_ITEM_KINDS)
    max_quantity: int = 100
    base_latency_ms: float = 100.0
    per_unit_latency_ms: float = 20.0
    rng_seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {self.capacity}")
        if self.target_count <= 0:
            raise ValueError(f"target_count must be a positive integer, got {self.target_count}")
        if not self.item_kinds:
            raise ValueError("item_kinds must name at least one kind")
        if self.max_quantity <= 0:
            raise ValueError(f"max_quantity must be positive, got {self.max_quantity}")
        if self.base_latency_ms < 0 or self.per_unit_latency_ms < 0:
            raise ValueError("latencies must be non-negative")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(cfg) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        kwargs = dict(cfg)
        if "item_kinds" in kwargs:
            kinds = kwargs["item_kinds"]
            if isinstance(kinds, str) or not isinstance(kinds, (list, tuple)):
                raise ValueError("item_kinds must be a list of labels")
            kwargs["item_kinds"] = tuple(str(k) for k in kinds)
        for key in ("capacity", "target_count", "max_quantity"):
            if key in kwargs:
                kwargs[key] = _as_int(key, kwargs[key])
        for key in ("base_latency_ms", "per_unit_latency_ms"):
            if key in kwargs:
                kwargs[key] = _as_float(key, kwargs[key])
        if kwargs.get("rng_seed") is not None:
            kwargs["rng_seed"] = _as_int("rng_seed", kwargs["rng_seed"])
        return cls(**kwargs)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["item_kinds"] = list(self.item_kinds)
        return d

def load_config(path: str) -> SimulationConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return SimulationConfig.from_dict(cfg)

def _as_int(key: str, value: Any) -> int:
    # YAML booleans are ints to Python; floats must be whole
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{key} must be a whole number, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc

def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number, got {value!r}") from exc
