import math
import threading

import pytest

from background import BackgroundTask, estimate_pi, run_pi_estimation


def test_estimate_pi_converges():
    assert estimate_pi(1) == 4.0
    assert estimate_pi(100_000) == pytest.approx(math.pi, abs=1e-4)


def test_estimate_pi_rejects_zero_terms():
    with pytest.raises(ValueError):
        estimate_pi(0)


def test_result_is_delivered_once():
    received = []
    delivered = threading.Event()

    def on_done(value):
        received.append(value)
        delivered.set()

    task = run_pi_estimation(1000, on_done=on_done)
    assert task.result(timeout=10) == pytest.approx(math.pi, abs=1e-2)
    assert delivered.wait(timeout=10)
    task._handle_done(task._future)
    assert received == [task.result()]
    assert task.delivered


def test_errors_are_raised_by_result_and_not_delivered():
    received = []

    def boom():
        raise RuntimeError("boom")

    task = BackgroundTask(boom, on_done=received.append)
    with pytest.raises(RuntimeError):
        task.result(timeout=10)
    assert received == []
    assert not task.delivered
