"""Tests for gastos.domain.categories pure functions."""

from gastos.domain.categories import (
    BUILTIN_CATEGORIES,
    can_add_category,
    clean_custom_labels,
    dedupe_labels,
    merge_categories,
)
from gastos.domain.models import CategoryName


class TestDedupeLabels:
    """Tests for dedupe_labels."""

    def test_trims_and_drops_repeats(self) -> None:
        """Should normalize labels and keep first occurrences."""
        assert dedupe_labels([" Gym", "Gym", "", "  ", "Kids"]) == ("Gym", "Kids")


class TestCleanCustomLabels:
    """Tests for clean_custom_labels."""

    def test_drops_builtin_shadows(self) -> None:
        """Should remove labels that duplicate a built-in."""
        assert clean_custom_labels(BUILTIN_CATEGORIES, ["Nafta", "Gym", "Gym "]) == ("Gym",)


class TestMergeCategories:
    """Tests for merge_categories."""

    def test_builtin_first(self) -> None:
        """Should list built-ins in order, then custom labels."""
        custom = (CategoryName("Gym"), CategoryName("Kids"))

        assert merge_categories(BUILTIN_CATEGORIES, custom) == BUILTIN_CATEGORIES + custom


class TestCanAddCategory:
    """Tests for can_add_category."""

    def test_rules(self) -> None:
        """Should refuse blank, built-in and existing custom labels."""
        custom = (CategoryName("Gym"),)

        assert can_add_category("Kids", BUILTIN_CATEGORIES, custom)
        assert not can_add_category("", BUILTIN_CATEGORIES, custom)
        assert not can_add_category("Nafta", BUILTIN_CATEGORIES, custom)
        assert not can_add_category("Gym", BUILTIN_CATEGORIES, custom)
