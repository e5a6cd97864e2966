"""Throttle: run a function at most once per time window."""

import functools
import threading
from typing import Any, Callable

from ..logging import log


class Throttled:
    """Callable wrapper that runs ``func`` at most once every ``wait`` seconds.

    The first call opens a window. With ``leading`` it runs immediately in
    the caller's thread. Calls made while the window is open are remembered
    (latest arguments win) and, with ``trailing``, replayed on the timer
    thread when the window closes; that replay opens the next window.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float,
        leading: bool = True,
        trailing: bool = True,
    ):
        if wait < 0:
            raise ValueError(f"wait must be non-negative, got {wait}")
        functools.update_wrapper(self, func)
        self._func = func
        self._name = getattr(func, "__name__", repr(func))
        self._wait = wait
        self._leading = leading
        self._trailing = trailing
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple, dict] | None = None
        self._generation = 0

    def _open_window(self) -> None:
        """Start the window timer; caller holds the lock."""
        self._generation += 1
        self._timer = threading.Timer(self._wait, self._on_window_end, args=(self._generation,))
        self._timer.daemon = True
        self._timer.start()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        call_now = False
        with self._lock:
            if self._timer is None:
                self._open_window()
                if self._leading:
                    call_now = True
                elif self._trailing:
                    self._pending = (args, kwargs)
            elif self._trailing:
                self._pending = (args, kwargs)

        if call_now:
            return self._func(*args, **kwargs)
        return None

    def _on_window_end(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            pending, self._pending = self._pending, None
            if pending is not None:
                self._open_window()
            else:
                self._timer = None

        if pending is not None:
            args, kwargs = pending
            try:
                self._func(*args, **kwargs)
            except Exception as e:
                log.error(f"Throttled call to {self._name} failed: {e}")
                raise

    def cancel(self) -> None:
        """Close the current window and drop any trailing call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._generation += 1


def throttle(
    func: Callable[..., Any],
    wait: float,
    leading: bool = True,
    trailing: bool = True,
) -> Throttled:
    """Wrap a function so it runs at most once per ``wait`` seconds.

    Args:
        func: Function to throttle
        wait: Window length in seconds
        leading: Run on the first call of a window
        trailing: Replay the latest suppressed call when the window closes

    Returns:
        Throttled wrapper exposing cancel()

    Examples:
        >>> calls = []
        >>> record = throttle(calls.append, 10, trailing=False)
        >>> record(1); record(2); record(3)
        >>> calls
        [1]
        >>> record.cancel()
    """
    log.debug(f"Throttling {getattr(func, '__name__', repr(func))} with wait={wait}s")
    return Throttled(func, wait, leading=leading, trailing=trailing)
