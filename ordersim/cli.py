from __future__ import annotations
import argparse
import os

from ordersim.engine.config import SimulationConfig, load_config
from ordersim.engine.logs import enable_logging
from ordersim.engine.simulation import Simulation

SAMPLE_CONFIG = """name: warehouse
capacity: 3
target_count: 15
item_kinds:
  - hiking
  - sneakers
  - running
max_quantity: 100
base_latency_ms: 100
per_unit_latency_ms: 20
rng_seed: 123
log_level: INFO
"""

def cmd_init(out_dir: str = "examples") -> str:
    os.makedirs(out_dir, exist_ok=True)
    out = os.path.join(out_dir, "warehouse.yaml")
    if not os.path.exists(out):
        with open(out, "w", encoding="utf-8") as f:
            f.write(SAMPLE_CONFIG)
    print(f"Wrote {out}")
    return out

def cmd_run(config_path: str | None = None) -> int:
    cfg = load_config(config_path) if config_path else SimulationConfig()
    enable_logging(cfg.log_level)

    summary = Simulation(cfg).run()

    m = summary.metrics
    print(f"Run {summary.run_id}: fulfilled {summary.fulfilled}/{cfg.target_count} orders")
    print(f"Duration: {m['duration_s']:.3f}s")
    print("Counters:")
    for k, v in sorted(m["counters"].items()):
        print(f"  {k}: {v}")
    print("Processing(ms):", m["processing_ms"])
    return summary.fulfilled

def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="ordersim")
    sub = ap.add_subparsers(dest="cmd")

    sub.add_parser("init")

    runp = sub.add_parser("run")
    runp.add_argument("config", nargs="?", default=None, help="YAML config path")

    args = ap.parse_args(argv)

    if args.cmd == "init":
        cmd_init()
    else:
        cmd_run(getattr(args, "config", None))

if __name__ == "__main__":
    main()
