"""Tests for gastos.dates pure functions."""

from datetime import datetime

import pytest

from gastos.dates import parse_date_input


class TestParseDateInput:
    """Tests for parse_date_input."""

    def test_iso_date(self) -> None:
        """Should parse YYYY-MM-DD without swapping day and month."""
        assert parse_date_input("2024-03-05") == datetime(2024, 3, 5)

    def test_iso_datetime(self) -> None:
        """Should keep the time of day."""
        assert parse_date_input("2024-03-05 18:30") == datetime(2024, 3, 5, 18, 30)

    def test_day_first(self) -> None:
        """Should read slashed dates day first."""
        assert parse_date_input("05/03/2024") == datetime(2024, 3, 5)

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert parse_date_input("  2024-12-31  ") == datetime(2024, 12, 31)

    def test_timezone_dropped(self) -> None:
        """Should return naive datetimes."""
        result = parse_date_input("2024-03-05T10:00:00+02:00")

        assert result.tzinfo is None
        assert result == datetime(2024, 3, 5, 10, 0)

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-45"])
    def test_invalid_raises_valueerror(self, value: str) -> None:
        """Should raise ValueError for unparseable input."""
        with pytest.raises(ValueError):
            parse_date_input(value)
