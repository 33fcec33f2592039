"""
Background computations for ChainCalc
Runs slow numeric work off the caller's thread and hands the result back once
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import config

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="chaincalc-bg")


def estimate_pi(terms=config.PI_DEFAULT_TERMS):
    """Approximate pi with the first `terms` terms of the Leibniz series"""
    if terms < 1:
        raise ValueError("terms must be at least 1")
    total = 0.0
    sign = 1.0
    for k in range(terms):
        total += sign / (2 * k + 1)
        sign = -sign
    return 4 * total


class BackgroundTask:
    """A function running on a worker thread, delivered to `on_done` exactly once"""

    def __init__(self, func, *args, on_done=None, executor=None):
        self.on_done = on_done
        self._delivered = False
        self._lock = threading.Lock()
        self._future = (executor or _executor).submit(func, *args)
        self._future.add_done_callback(self._handle_done)

    def _handle_done(self, future):
        if future.exception() is not None:
            logger.warning("Background task failed: %s", future.exception())
            return
        self._deliver(future.result())

    def _deliver(self, value):
        """Hand `value` to the callback unless a result was already delivered"""
        with self._lock:
            if self._delivered:
                return False
            self._delivered = True
        if self.on_done is not None:
            self.on_done(value)
        return True

    @property
    def delivered(self):
        return self._delivered

    def done(self):
        return self._future.done()

    def result(self, timeout=None):
        """Block until the task finishes; re-raises its error"""
        return self._future.result(timeout)


def run_pi_estimation(terms=config.PI_DEFAULT_TERMS, on_done=None):
    """Start a pi estimation in the background"""
    logger.debug("Estimating pi with %d terms", terms)
    return BackgroundTask(estimate_pi, terms, on_done=on_done)
