"""Error-as-value wrappers.

Instead of letting an exception propagate, these helpers return a pair
``(error, result)`` where exactly one side is None, so callers can branch
on the error without a try block:

    error, config = try_catch_sync(lambda: json.loads(raw))
    if error:
        ...
"""

from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from .logging import log

T = TypeVar('T')

Result = Tuple[Optional[Exception], Optional[T]]


def _extend_error(error: Exception, error_ext: Optional[Dict[str, Any]]) -> Exception:
    """Attach extra context to a caught exception as attributes."""
    if error_ext:
        for key, value in error_ext.items():
            setattr(error, key, value)
    return error


def try_catch_sync(operation: Callable[[], T], error_ext: Optional[Dict[str, Any]] = None) -> Result[T]:
    """Run a callable and return its outcome as an ``(error, result)`` pair.

    Args:
        operation: Zero-argument callable to run
        error_ext: Extra attributes set on the exception when one is caught

    Returns:
        ``(None, result)`` on success, ``(exception, None)`` on failure

    Examples:
        >>> try_catch_sync(lambda: 1 + 1)
        (None, 2)
        >>> error, result = try_catch_sync(lambda: int("x"), {"field": "age"})
        >>> type(error).__name__, error.field, result
        ('ValueError', 'age', None)
    """
    try:
        return None, operation()
    except Exception as e:
        log.debug(f"try_catch_sync caught {type(e).__name__}: {e}")
        return _extend_error(e, error_ext), None


async def try_catch_async(awaitable: Awaitable[T], error_ext: Optional[Dict[str, Any]] = None) -> Result[T]:
    """Await a coroutine or future and return an ``(error, result)`` pair.

    Args:
        awaitable: Coroutine, task or future to await
        error_ext: Extra attributes set on the exception when one is caught

    Returns:
        ``(None, result)`` on success, ``(exception, None)`` on failure
    """
    try:
        return None, await awaitable
    except Exception as e:
        log.debug(f"try_catch_async caught {type(e).__name__}: {e}")
        return _extend_error(e, error_ext), None
