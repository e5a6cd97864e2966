"""Unit tests for list manipulation functions."""

import numpy as np
import pytest

from utilkit.utils.containers.arrays import (
    is_array,
    unique,
    unique_by_value,
    merge,
    get,
    set_item,
    sum_of,
    average,
    flatten,
)


class TestIsArray:
    """Test is_array function."""

    @pytest.mark.parametrize("value,expected", [
        ([], True),
        ((1, 2), True),
        (np.array([1, 2]), True),
        ("abc", False),
        ({"a": 1}, False),
        ({1, 2}, False),
        (None, False),
    ])
    def test_detection(self, value, expected):
        assert is_array(value) is expected


class TestUnique:
    """Test unique and unique_by_value."""

    def test_unique_keeps_first_occurrence(self):
        assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_unique_empty(self):
        assert unique([]) == []

    def test_unique_by_value_dicts(self):
        items = [{"a": 1}, {"a": 1}, {"a": 2}]
        assert unique_by_value(items) == [{"a": 1}, {"a": 2}]

    def test_unique_by_value_nested_lists(self):
        assert unique_by_value([[1, 2], [1, 2], [2, 1]]) == [[1, 2], [2, 1]]

    def test_unique_by_value_key_order_matters(self):
        items = [{"a": 1, "b": 2}, {"b": 2, "a": 1}]
        assert len(unique_by_value(items)) == 2

    def test_unique_by_value_distinguishes_types(self):
        assert unique_by_value([1, "1", 1]) == [1, "1"]


class TestMerge:
    """Test merge function."""

    def test_concatenates(self):
        assert merge([1, 2], (3,), [4, 5]) == [1, 2, 3, 4, 5]

    def test_returns_new_list(self):
        first = [1]
        result = merge(first)
        assert result == first
        assert result is not first

    def test_no_arguments(self):
        assert merge() == []


class TestGetAndSetItem:
    """Test get and set_item."""

    @pytest.mark.parametrize("index,expected", [(0, 1), (2, 3), (3, None), (-1, None)])
    def test_get(self, index, expected):
        assert get([1, 2, 3], index) == expected

    def test_set_within_range(self):
        values = [1, 2, 3]
        set_item(values, 1, 20)
        assert values == [1, 20, 3]

    def test_set_pads_with_none(self):
        values = [1, 2]
        set_item(values, 4, 5)
        assert values == [1, 2, None, None, 5]

    def test_set_negative_raises(self):
        with pytest.raises(IndexError, match="non-negative"):
            set_item([1], -1, 0)


class TestSumAndAverage:
    """Test sum_of and average."""

    def test_sum(self):
        assert sum_of([1, 2, 3.5]) == 6.5

    def test_sum_empty(self):
        assert sum_of([]) == 0

    def test_average(self):
        assert average([1, 2, 3, 4]) == 2.5

    def test_average_empty(self):
        assert average([]) == 0


class TestFlatten:
    """Test flatten function."""

    def test_nested(self):
        assert flatten([1, [2, [3, 4]], 5]) == [1, 2, 3, 4, 5]

    def test_tuples_flattened(self):
        assert flatten([(1, 2), [3, (4,)]]) == [1, 2, 3, 4]

    def test_strings_kept_whole(self):
        assert flatten(["ab", ["cd"]]) == ["ab", "cd"]

    def test_numpy_array(self):
        assert flatten(np.array([[1, 2], [3, 4]])) == [1, 2, 3, 4]

    def test_empty_nested(self):
        assert flatten([[], [[]]]) == []
