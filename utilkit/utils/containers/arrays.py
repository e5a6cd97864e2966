"""Pure functions for list manipulation.

Array-like inputs are lists, tuples and numpy arrays. Helpers return new
lists; only set_item mutates its argument.
"""

import json
from itertools import chain
from typing import Any, Iterable, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_ARRAY_TYPES = (list, tuple, np.ndarray)


def is_array(value: Any) -> bool:
    """Check if value is a list, tuple or numpy array.

    Examples:
        >>> is_array([1, 2])
        True
        >>> is_array("abc")
        False
    """
    return isinstance(value, _ARRAY_TYPES)


def unique(items: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each item.

    Items must be hashable; see unique_by_value for dicts and lists.

    Examples:
        >>> unique([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    return list(dict.fromkeys(items))


def _value_key(item: Any) -> str:
    if isinstance(item, (dict, list, tuple)):
        return "json:" + json.dumps(item, sort_keys=False, default=str)
    return f"{type(item).__name__}:{item!r}"


def unique_by_value(items: Iterable[T]) -> list[T]:
    """Remove duplicates by value, supporting unhashable items.

    Dicts, lists and tuples are compared through their JSON form, so two
    dicts are duplicates only when their keys are in the same order.

    Examples:
        >>> unique_by_value([{"a": 1}, {"a": 1}, {"a": 2}])
        [{'a': 1}, {'a': 2}]
    """
    seen = set()
    result = []
    for item in items:
        key = _value_key(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def merge(*arrays: Iterable[T]) -> list[T]:
    """Concatenate arrays into a new list.

    Examples:
        >>> merge([1, 2], (3,), [4, 5])
        [1, 2, 3, 4, 5]
    """
    return list(chain.from_iterable(arrays))


def get(items: Sequence[T], index: int) -> T | None:
    """Return the item at a non-negative index, or None when out of range.

    Examples:
        >>> get([1, 2, 3], 1)
        2
        >>> get([1, 2, 3], 5) is None
        True
        >>> get([1, 2, 3], -1) is None
        True
    """
    if 0 <= index < len(items):
        return items[index]
    return None


def set_item(items: list, index: int, value: Any) -> None:
    """Set the item at index in place, padding with None when past the end.

    Raises:
        IndexError: If index is negative

    Examples:
        >>> values = [1, 2]
        >>> set_item(values, 4, 5)
        >>> values
        [1, 2, None, None, 5]
    """
    if index < 0:
        raise IndexError(f"index must be non-negative, got {index}")
    if index >= len(items):
        items.extend([None] * (index - len(items) + 1))
    items[index] = value


def sum_of(items: Iterable[int | float]) -> int | float:
    """Sum numeric items, 0 for an empty input.

    Examples:
        >>> sum_of([1, 2, 3.5])
        6.5
    """
    return sum(items, 0)


def average(items: Sequence[int | float]) -> float:
    """Arithmetic mean, 0 for an empty input.

    Examples:
        >>> average([1, 2, 3, 4])
        2.5
        >>> average([])
        0
    """
    if len(items) == 0:
        return 0
    return sum_of(items) / len(items)


def flatten(items: Iterable[Any]) -> list[Any]:
    """Recursively flatten nested arrays into one list.

    Strings and other non-array iterables are kept as single items.

    Examples:
        >>> flatten([1, [2, [3, 4]], 5])
        [1, 2, 3, 4, 5]
    """
    if isinstance(items, np.ndarray):
        items = items.tolist()
    result = []
    for item in items:
        if is_array(item):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result
