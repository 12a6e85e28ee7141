"""Tests for calendar parsing, normalization, and shifting."""

from __future__ import annotations

from datetime import date

import pytest

from rescisao.core.calendar import (
    day_difference,
    last_day_of_month,
    month_key,
    months_between,
    parse_iso_date,
    parse_month_key,
    shift_months,
    shift_years,
)
from rescisao.core.exceptions import InvalidInput


class TestParseIsoDate:
    def test_parses_plain_date(self):
        assert parse_iso_date("2025-03-15") == date(2025, 3, 15)

    def test_passes_date_objects_through(self):
        assert parse_iso_date(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_day_overflow_rolls_into_next_month(self):
        assert parse_iso_date("2025-01-32") == date(2025, 2, 1)
        assert parse_iso_date("2025-02-30") == date(2025, 3, 2)

    def test_month_overflow_rolls_into_next_year(self):
        assert parse_iso_date("2024-13-01") == date(2025, 1, 1)

    def test_day_zero_is_last_day_of_previous_month(self):
        assert parse_iso_date("2024-03-00") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["", "2025-03", "abc", "2025-xx-01", "2025/03/15", None])
    def test_rejects_non_numeric_triples(self, value):
        with pytest.raises(InvalidInput):
            parse_iso_date(value)


class TestDayDifference:
    def test_is_absolute(self):
        assert day_difference(date(2025, 3, 15), date(2023, 1, 1)) == 804
        assert day_difference(date(2023, 1, 1), date(2025, 3, 15)) == 804

    def test_same_day_is_zero(self):
        assert day_difference(date(2025, 1, 1), date(2025, 1, 1)) == 0


class TestShifting:
    def test_month_shift_overflows_short_months(self):
        assert shift_months(date(2025, 1, 31), 1) == date(2025, 3, 3)
        assert shift_months(date(2024, 1, 31), 1) == date(2024, 3, 2)

    def test_month_shift_crosses_years(self):
        assert shift_months(date(2024, 12, 10), 1) == date(2025, 1, 10)
        assert shift_months(date(2025, 1, 1), -1) == date(2024, 12, 1)

    def test_leap_day_anniversary_rolls_to_march(self):
        assert shift_years(date(2020, 2, 29), 1) == date(2021, 3, 1)
        assert shift_years(date(2020, 2, 29), 4) == date(2024, 2, 29)

    def test_months_between_ignores_day(self):
        assert months_between(date(2023, 1, 31), date(2025, 3, 1)) == 26

    def test_last_day_of_month(self):
        assert last_day_of_month(date(2024, 2, 10)) == 29
        assert last_day_of_month(date(2025, 2, 10)) == 28
        assert last_day_of_month(date(2025, 12, 1)) == 31


class TestMonthKeys:
    def test_round_trip(self):
        assert month_key(parse_month_key("2024-07")) == "2024-07"

    @pytest.mark.parametrize("key", ["2024-7", "2024-13", "2024-00", "24-07", "2024-07-01"])
    def test_rejects_malformed_keys(self, key):
        with pytest.raises(InvalidInput):
            parse_month_key(key)
