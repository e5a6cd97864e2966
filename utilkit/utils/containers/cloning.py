"""Shallow and deep copies of nested containers."""

import copy
from typing import TypeVar

T = TypeVar("T")


def clone_shallow(value: T) -> T:
    """Copy the top level of a container, sharing its children.

    Dicts, lists and sets get a new outer container of the same type.
    Anything else, tuples included, is returned unchanged.

    Examples:
        >>> original = {"name": "Alice", "hobbies": ["reading"]}
        >>> copied = clone_shallow(original)
        >>> copied is original, copied["hobbies"] is original["hobbies"]
        (False, True)
    """
    if isinstance(value, (dict, list, set)):
        return value.copy()
    return value


def clone_deep(value: T) -> T:
    """Copy a value with no references shared with the original.

    Plain dicts, lists, tuples and sets are rebuilt recursively; other
    objects, subclasses of those included, go through copy.deepcopy.
    Immutable scalars are returned as is.

    Examples:
        >>> original = {"address": {"city": "Wonderland"}}
        >>> copied = clone_deep(original)
        >>> copied["address"]["city"] = "New Wonderland"
        >>> original["address"]["city"]
        'Wonderland'
    """
    kind = type(value)
    if kind is dict:
        return {key: clone_deep(item) for key, item in value.items()}
    if kind is list:
        return [clone_deep(item) for item in value]
    if kind is tuple:
        return tuple(clone_deep(item) for item in value)
    if kind is set:
        return {clone_deep(item) for item in value}
    if value is None or isinstance(value, (str, bytes, int, float, complex, bool)):
        return value
    return copy.deepcopy(value)
