import threading
import time

import pytest


def wait_until(predicate, timeout=5.0):
    """Poll predicate() from the test thread; fails the test on timeout."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            pytest.fail("condition not reached in time")
        time.sleep(0.005)


def start_thread(fn, *args):
    """Run fn in a daemon thread. Returns (thread, outcome); outcome gets 'result' or 'error'."""
    outcome = {}

    def target():
        try:
            outcome["result"] = fn(*args)
        except BaseException as exc:
            outcome["error"] = exc

    t = threading.Thread(target=target, daemon=True)
    t.start()
    return t, outcome
