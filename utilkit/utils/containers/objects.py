"""Pure functions for inspecting and combining mappings.

The Python counterpart of a plain object is a ``dict``; "plain" means an
exact dict rather than a dict subclass or an arbitrary class instance.
"""

import json
from typing import Any, Mapping


def is_object(value: Any) -> bool:
    """Check if value is a mapping.

    Examples:
        >>> is_object({})
        True
        >>> is_object([])
        False
        >>> is_object(None)
        False
    """
    return isinstance(value, Mapping)


def is_plain_object(value: Any) -> bool:
    """Check if value is exactly a dict (subclasses excluded).

    Examples:
        >>> is_plain_object({"a": 1})
        True
        >>> from collections import OrderedDict
        >>> is_plain_object(OrderedDict())
        False
    """
    return type(value) is dict


def is_empty(obj: Mapping | Any) -> bool:
    """Check if a mapping (or an object's attribute dict) has no keys.

    Examples:
        >>> is_empty({})
        True
        >>> is_empty({"a": 1})
        False
    """
    return len(keys(obj)) == 0


def get(obj: Mapping | Any, key: str, default: Any = None) -> Any:
    """Read a key from a mapping or an attribute from an object.

    Examples:
        >>> get({"a": 1}, "a")
        1
        >>> get({"a": 1}, "b", 0)
        0
    """
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def set_value(obj: dict | Any, key: str, value: Any) -> None:
    """Write a key on a dict or an attribute on an object, in place.

    Examples:
        >>> data = {}
        >>> set_value(data, "a", 1)
        >>> data
        {'a': 1}
    """
    if isinstance(obj, dict):
        obj[key] = value
    else:
        setattr(obj, key, value)


def is_equal(first: Any, second: Any) -> bool:
    """Compare two values through their JSON serialization.

    Key order matters: ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` are not
    equal. Values that JSON cannot represent are serialized with str().

    Examples:
        >>> is_equal({"a": [1, 2]}, {"a": [1, 2]})
        True
        >>> is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        False
    """
    return json.dumps(first, default=str) == json.dumps(second, default=str)


def keys(obj: Mapping | Any) -> list[str]:
    """List the keys of a mapping or the public attributes of an object.

    Examples:
        >>> keys({"a": 1, "b": 2})
        ['a', 'b']
    """
    if isinstance(obj, Mapping):
        return list(obj.keys())
    return [name for name in vars(obj) if not name.startswith("_")]


def merge(target: Mapping, *sources: Mapping) -> dict:
    """Merge mappings into a new dict; later sources win.

    Examples:
        >>> merge({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}
    """
    result = dict(target)
    for source in sources:
        result.update(source)
    return result


def is_instance_of_exact(obj: Any, cls: type, allow_subclass: bool = False) -> bool:
    """Check if obj is an instance of exactly cls.

    Args:
        obj: Object to check
        cls: Expected class
        allow_subclass: Also accept instances of subclasses of cls

    Examples:
        >>> is_instance_of_exact(True, int)
        False
        >>> is_instance_of_exact(True, int, allow_subclass=True)
        True
    """
    if allow_subclass:
        return isinstance(obj, cls)
    return type(obj) is cls
