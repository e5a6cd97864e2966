"""Unit tests for date arithmetic and formatting."""

from datetime import date, datetime

import pytest

from utilkit.utils.date_utils import (
    DateDiff,
    format_date,
    date_diff,
    is_leap_year,
    get_days_in_month,
    add_days,
    get_dates_between,
    is_same_day,
)


class TestFormatDate:
    """Test format_date function."""

    def test_full_format(self):
        moment = datetime(2023, 1, 1, 14, 30, 0)
        assert format_date(moment, "YYYY-MM-DD HH:mm:ss") == "2023-01-01 14:30:00"

    def test_literal_characters_kept(self):
        assert format_date(date(2023, 1, 1), "YYYY年MM月DD日") == "2023年01月01日"

    def test_plain_date_is_midnight(self):
        assert format_date(date(2023, 7, 4), "HH:mm:ss") == "00:00:00"

    def test_month_and_minute_tokens_are_case_sensitive(self):
        moment = datetime(2023, 3, 9, 8, 5, 7)
        assert format_date(moment, "MM/mm") == "03/05"


class TestDateDiff:
    """Test date_diff function."""

    def test_split_into_units(self):
        result = date_diff(datetime(2023, 1, 1), datetime(2023, 1, 5, 12, 30, 45))
        assert result == DateDiff(days=4, hours=12, minutes=30, seconds=45)

    def test_is_absolute(self):
        first, second = datetime(2023, 1, 1), datetime(2023, 1, 3)
        assert date_diff(first, second) == date_diff(second, first)

    def test_same_moment(self):
        moment = datetime(2023, 1, 1, 12)
        assert date_diff(moment, moment) == DateDiff(0, 0, 0, 0)

    def test_plain_dates(self):
        assert date_diff(date(2024, 2, 28), date(2024, 3, 1)).days == 2


class TestCalendarHelpers:
    """Test is_leap_year and get_days_in_month."""

    @pytest.mark.parametrize("year,expected", [(2020, True), (2000, True), (1900, False), (2023, False)])
    def test_is_leap_year(self, year, expected):
        assert is_leap_year(date(year, 6, 1)) is expected

    @pytest.mark.parametrize("value,expected", [
        (date(2023, 1, 15), 31),
        (date(2023, 2, 1), 28),
        (date(2024, 2, 1), 29),
        (date(2023, 4, 30), 30),
    ])
    def test_get_days_in_month(self, value, expected):
        assert get_days_in_month(value) == expected


class TestAddDays:
    """Test add_days function."""

    def test_forward_across_month(self):
        assert add_days(date(2023, 1, 31), 1) == date(2023, 2, 1)

    def test_backward_across_year(self):
        assert add_days(date(2023, 1, 1), -1) == date(2022, 12, 31)

    def test_keeps_time_and_original(self):
        original = datetime(2023, 1, 1, 9, 15)
        result = add_days(original, 10)
        assert result == datetime(2023, 1, 11, 9, 15)
        assert original == datetime(2023, 1, 1, 9, 15)


class TestGetDatesBetween:
    """Test get_dates_between function."""

    def test_inclusive(self):
        result = get_dates_between(date(2023, 1, 1), date(2023, 1, 5))
        assert result == [date(2023, 1, d) for d in range(1, 6)]

    def test_same_day(self):
        assert get_dates_between(date(2023, 1, 1), date(2023, 1, 1)) == [date(2023, 1, 1)]

    def test_start_after_end_is_empty(self):
        assert get_dates_between(date(2023, 1, 5), date(2023, 1, 1)) == []

    def test_keeps_time_of_day(self):
        result = get_dates_between(datetime(2023, 1, 1, 10), datetime(2023, 1, 3, 12))
        assert result == [datetime(2023, 1, d, 10) for d in (1, 2, 3)]

    def test_mixed_date_and_datetime(self):
        result = get_dates_between(date(2023, 1, 1), datetime(2023, 1, 2, 8))
        assert result == [datetime(2023, 1, 1), datetime(2023, 1, 2)]


class TestIsSameDay:
    """Test is_same_day function."""

    def test_same_day_different_times(self):
        assert is_same_day(datetime(2023, 1, 1, 10, 30), datetime(2023, 1, 1, 15, 45))

    def test_different_days(self):
        assert not is_same_day(datetime(2023, 1, 1, 23, 59), datetime(2023, 1, 2, 0, 0))

    def test_date_and_datetime(self):
        assert is_same_day(date(2023, 1, 1), datetime(2023, 1, 1, 8))
