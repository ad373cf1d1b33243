"""Tests for gastos.domain.comparison pure functions."""

from datetime import datetime

from gastos.domain.comparison import ComparisonRow, change_percent, compare_years, comparison_totals
from gastos.domain.models import Money


class TestChangePercent:
    """Tests for change_percent."""

    def test_both_zero(self) -> None:
        """Should be 0 when neither year has spending."""
        assert change_percent(Money(0), Money(0)) == 0

    def test_new_spending(self) -> None:
        """Should be 100 when only the second year has spending."""
        assert change_percent(Money(0), Money(1)) == 100

    def test_relative_change(self) -> None:
        """Should round the relative change to the nearest integer."""
        assert change_percent(Money(100), Money(50)) == -50
        assert change_percent(Money(300), Money(0)) == -100
        assert change_percent(Money(200), Money(201)) == 1  # 0.5% rounds up
        assert change_percent(Money(200), Money(199)) == 0  # -0.5% rounds toward +inf
        assert change_percent(Money(3), Money(4)) == 33


class TestCompareYears:
    """Tests for compare_years."""

    def test_scenario(self, sample_expenses) -> None:
        """Should compare 2024 against 2025 and sort by 2025 spending."""
        rows = compare_years(sample_expenses, 2024, 2025)

        assert rows == [
            ComparisonRow(category="Nafta", sum_a=100, sum_b=50, diff=-50, percent=-50),
            ComparisonRow(category="Supermercado", sum_a=300, sum_b=0, diff=-300, percent=-100),
        ]

    def test_ignores_other_years(self, make_expense) -> None:
        """Should skip records outside both years."""
        records = [
            make_expense(100, "Nafta", datetime(2023, 6, 1)),
            make_expense(40, "Perra", datetime(2024, 6, 1)),
        ]

        rows = compare_years(records, 2024, 2025)

        assert [row.category for row in rows] == ["Perra"]

    def test_category_only_in_second_year(self, make_expense) -> None:
        """Should report 100% for categories new in year B."""
        records = [make_expense(80, "Salidas", datetime(2025, 2, 1))]

        assert compare_years(records, 2024, 2025) == [
            ComparisonRow(category="Salidas", sum_a=0, sum_b=80, diff=80, percent=100)
        ]

    def test_ties_keep_first_seen_order(self, make_expense) -> None:
        """Should keep first-seen category order for equal year B totals."""
        records = [
            make_expense(10, "Servicios", datetime(2024, 1, 1)),
            make_expense(20, "Perra", datetime(2024, 1, 2)),
            make_expense(30, "Varios", datetime(2025, 1, 1)),
            make_expense(30, "Nafta", datetime(2025, 1, 2)),
        ]

        rows = compare_years(records, 2024, 2025)

        assert [row.category for row in rows] == ["Varios", "Nafta", "Servicios", "Perra"]

    def test_same_year(self, sample_expenses) -> None:
        """Should produce zero deltas when both years are equal."""
        rows = compare_years(sample_expenses, 2024, 2024)

        assert {row.category for row in rows} == {"Nafta", "Supermercado"}
        for row in rows:
            assert row.sum_a == row.sum_b
            assert row.diff == 0
            assert row.percent == 0

    def test_no_data(self) -> None:
        """Should return an empty list without data."""
        assert compare_years([], 2024, 2025) == []

    def test_swapping_years(self, make_expense) -> None:
        """Should swap sums and negate diffs when years are swapped."""
        records = [
            make_expense(100, "Nafta", datetime(2024, 3, 1)),
            make_expense(300, "Supermercado", datetime(2024, 3, 15)),
            make_expense(50, "Nafta", datetime(2025, 3, 1)),
            make_expense(70, "Perra", datetime(2025, 8, 1)),
        ]

        forward = {row.category: row for row in compare_years(records, 2024, 2025)}
        backward = {row.category: row for row in compare_years(records, 2025, 2024)}

        assert forward.keys() == backward.keys()
        for category, row in forward.items():
            assert backward[category].sum_a == row.sum_b
            assert backward[category].sum_b == row.sum_a
            assert backward[category].diff == -row.diff


class TestComparisonTotals:
    """Tests for comparison_totals."""

    def test_totals(self, sample_expenses) -> None:
        """Should add up every category."""
        total = comparison_totals(compare_years(sample_expenses, 2024, 2025))

        assert total == ComparisonRow(category="Total", sum_a=400, sum_b=50, diff=-350, percent=-87)  # -87.5% rounds up

    def test_empty(self) -> None:
        """Should be all zeros for no rows."""
        assert comparison_totals([]) == ComparisonRow(category="Total", sum_a=0, sum_b=0, diff=0, percent=0)
