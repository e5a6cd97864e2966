"""Unit tests for the debounce and throttle wrappers.

Long waits are used wherever the timer must not fire during the test, and
short waits with an Event wherever it must.
"""

import threading
import time

import pytest

from utilkit.utils.timing.debounce import Debounced, debounce
from utilkit.utils.timing.throttle import Throttled, throttle

LONG_WAIT = 30
SHORT_WAIT = 0.05


class Recorder:
    """Callable that records its arguments and signals every call."""

    def __init__(self):
        self.calls = []
        self.called = threading.Event()

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.called.set()
        return len(self.calls)


class TestDebounce:
    """Test debounce function."""

    def test_returns_wrapper(self):
        def save():
            """Save a draft."""

        wrapped = debounce(save, LONG_WAIT)
        assert isinstance(wrapped, Debounced)
        assert wrapped.__name__ == "save"
        assert wrapped.__doc__ == "Save a draft."

    def test_trailing_call_uses_last_arguments(self):
        recorder = Recorder()
        wrapped = debounce(recorder, SHORT_WAIT)
        wrapped(1)
        wrapped(2)
        wrapped(3, key="value")
        assert recorder.called.wait(2)
        time.sleep(SHORT_WAIT * 3)
        assert recorder.calls == [((3,), {"key": "value"})]

    def test_does_not_run_before_wait(self):
        recorder = Recorder()
        wrapped = debounce(recorder, LONG_WAIT)
        assert wrapped("x") is None
        assert recorder.calls == []
        assert wrapped.pending
        wrapped.cancel()

    def test_cancel_drops_call(self):
        recorder = Recorder()
        wrapped = debounce(recorder, SHORT_WAIT)
        wrapped("x")
        wrapped.cancel()
        assert not wrapped.pending
        time.sleep(SHORT_WAIT * 4)
        assert recorder.calls == []

    def test_flush_runs_pending_call_now(self):
        recorder = Recorder()
        wrapped = debounce(recorder, LONG_WAIT)
        wrapped("draft 1")
        wrapped("draft 2")
        assert wrapped.flush() == 1
        assert recorder.calls == [(("draft 2",), {})]
        assert not wrapped.pending

    def test_flush_without_pending_call(self):
        recorder = Recorder()
        wrapped = debounce(recorder, LONG_WAIT)
        assert wrapped.flush() is None
        assert recorder.calls == []

    def test_immediate_runs_first_call_only(self):
        recorder = Recorder()
        wrapped = debounce(recorder, LONG_WAIT, immediate=True)
        assert wrapped("first") == 1
        assert wrapped("second") is None
        assert recorder.calls == [(("first",), {})]
        assert not wrapped.pending
        wrapped.cancel()

    def test_immediate_runs_again_after_quiet_period(self):
        recorder = Recorder()
        wrapped = debounce(recorder, SHORT_WAIT, immediate=True)
        wrapped("first")
        time.sleep(SHORT_WAIT * 4)
        wrapped("second")
        assert [args for args, _ in recorder.calls] == [("first",), ("second",)]
        wrapped.cancel()

    def test_negative_wait_raises(self):
        with pytest.raises(ValueError, match="wait must be non-negative"):
            debounce(lambda: None, -1)


class TestThrottle:
    """Test throttle function."""

    def test_returns_wrapper(self):
        wrapped = throttle(Recorder(), LONG_WAIT)
        assert isinstance(wrapped, Throttled)
        wrapped.cancel()

    def test_leading_call_runs_synchronously(self):
        recorder = Recorder()
        wrapped = throttle(recorder, LONG_WAIT)
        assert wrapped("a") == 1
        assert recorder.calls == [(("a",), {})]
        wrapped.cancel()

    def test_suppresses_calls_within_window(self):
        recorder = Recorder()
        wrapped = throttle(recorder, LONG_WAIT, trailing=False)
        for value in range(5):
            wrapped(value)
        assert recorder.calls == [((0,), {})]
        wrapped.cancel()

    def test_trailing_call_uses_latest_arguments(self):
        recorder = Recorder()
        wrapped = throttle(recorder, SHORT_WAIT)
        wrapped(1)
        recorder.called.clear()
        wrapped(2)
        wrapped(3)
        assert recorder.called.wait(2)
        assert recorder.calls == [((1,), {}), ((3,), {})]
        wrapped.cancel()

    def test_trailing_only(self):
        recorder = Recorder()
        wrapped = throttle(recorder, SHORT_WAIT, leading=False)
        assert wrapped("a") is None
        wrapped("b")
        assert recorder.calls == []
        assert recorder.called.wait(2)
        assert recorder.calls == [(("b",), {})]
        wrapped.cancel()

    def test_new_window_after_quiet_period(self):
        recorder = Recorder()
        wrapped = throttle(recorder, SHORT_WAIT, trailing=False)
        wrapped("a")
        time.sleep(SHORT_WAIT * 4)
        wrapped("b")
        assert [args for args, _ in recorder.calls] == [("a",), ("b",)]
        wrapped.cancel()

    def test_cancel_drops_trailing_call(self):
        recorder = Recorder()
        wrapped = throttle(recorder, SHORT_WAIT)
        wrapped(1)
        wrapped(2)
        wrapped.cancel()
        time.sleep(SHORT_WAIT * 4)
        assert recorder.calls == [((1,), {})]

    def test_cancel_reopens_window(self):
        recorder = Recorder()
        wrapped = throttle(recorder, LONG_WAIT)
        wrapped(1)
        wrapped.cancel()
        wrapped(2)
        assert recorder.calls == [((1,), {}), ((2,), {})]
        wrapped.cancel()

    def test_negative_wait_raises(self):
        with pytest.raises(ValueError, match="wait must be non-negative"):
            throttle(lambda: None, -0.5)
