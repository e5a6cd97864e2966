"""Debounce: run a function only after calls have stopped for a while."""

import functools
import threading
from typing import Any, Callable

from ..logging import log


class Debounced:
    """Callable wrapper that delays ``func`` until ``wait`` seconds pass without a call.

    Every call restarts the timer. In trailing mode (the default) the
    function runs once on the timer thread with the arguments of the last
    call. With ``immediate=True`` the first call of a burst runs right away
    in the caller's thread and the rest of the burst is dropped.
    """

    def __init__(self, func: Callable[..., Any], wait: float, immediate: bool = False):
        if wait < 0:
            raise ValueError(f"wait must be non-negative, got {wait}")
        functools.update_wrapper(self, func)
        self._func = func
        self._name = getattr(func, "__name__", repr(func))
        self._wait = wait
        self._immediate = immediate
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple, dict] | None = None
        # Bumped on every call so a timer that already fired cannot act on newer state
        self._generation = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            call_now = self._immediate and self._timer is None
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = None if self._immediate else (args, kwargs)
            self._timer = threading.Timer(self._wait, self._on_timeout, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

        if call_now:
            return self._func(*args, **kwargs)
        return None

    def _on_timeout(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            pending, self._pending = self._pending, None
        if pending is not None:
            self._invoke(pending)

    def _invoke(self, pending: tuple[tuple, dict]) -> Any:
        args, kwargs = pending
        try:
            return self._func(*args, **kwargs)
        except Exception as e:
            log.error(f"Debounced call to {self._name} failed: {e}")
            raise

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled."""
        with self._lock:
            return self._pending is not None

    def cancel(self) -> None:
        """Drop the scheduled call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._generation += 1

    def flush(self) -> Any:
        """Run the scheduled call now instead of waiting for the timer.

        Returns:
            The function's result, or None when nothing was pending
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1
            pending, self._pending = self._pending, None
        if pending is None:
            return None
        return self._invoke(pending)


def debounce(func: Callable[..., Any], wait: float, immediate: bool = False) -> Debounced:
    """Wrap a function so bursts of calls collapse into one.

    Args:
        func: Function to debounce
        wait: Quiet period in seconds
        immediate: Run on the leading edge of a burst instead of the trailing edge

    Returns:
        Debounced wrapper exposing cancel(), flush() and pending

    Examples:
        >>> saved = []
        >>> save = debounce(saved.append, 10)
        >>> save("draft 1"); save("draft 2")
        >>> save.flush()
        >>> saved
        ['draft 2']
    """
    log.debug(f"Debouncing {getattr(func, '__name__', repr(func))} with wait={wait}s")
    return Debounced(func, wait, immediate=immediate)
