import pytest

from ordersim.engine.config import SimulationConfig
from ordersim.engine.logs import enable_logging


@pytest.fixture(autouse=True)
def setup_logging():
    # Re-bind per test: pytest swaps sys.stderr for each test's capture.
    enable_logging("DEBUG")
    yield


@pytest.fixture
def fast_config():
    return SimulationConfig(
        name="test",
        capacity=3,
        target_count=15,
        base_latency_ms=0,
        per_unit_latency_ms=0,
        rng_seed=7,
        log_level="DEBUG",
    )
