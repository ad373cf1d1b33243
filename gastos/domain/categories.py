"""Pure functions for the category taxonomy.

Built-in categories are fixed when the taxonomy is created. Custom categories
are appended by the user, keep their insertion order and never duplicate a
built-in label.
"""

from collections.abc import Iterable, Sequence
from typing import Literal

from gastos.domain.models import CategoryName

BUILTIN_CATEGORIES: tuple[CategoryName, ...] = (
    CategoryName("Supermercado"),
    CategoryName("Nafta"),
    CategoryName("Perra"),
    CategoryName("Salidas"),
    CategoryName("Servicios"),
    CategoryName("Varios"),
)

# What to do with an expense whose category is not in the taxonomy
UnknownCategoryPolicy = Literal["accept", "register", "reject"]
UNKNOWN_CATEGORY_POLICIES: tuple[str, ...] = ("accept", "register", "reject")


def normalize_label(label: str) -> str:
    """Trim surrounding whitespace from a category label."""
    return label.strip()


def dedupe_labels(labels: Iterable[str]) -> tuple[CategoryName, ...]:
    """Normalize labels, dropping blanks and repeats while keeping order."""
    seen: dict[str, None] = {}
    for label in labels:
        normalized = normalize_label(label)
        if normalized:
            seen.setdefault(normalized, None)
    return tuple(CategoryName(label) for label in seen)


def clean_custom_labels(
    builtin: Sequence[CategoryName],
    custom: Iterable[str],
) -> tuple[CategoryName, ...]:
    """Drop custom labels that are blank, repeated, or shadow a built-in.

    Args:
        builtin: Built-in category labels.
        custom: Stored custom labels, possibly from an older or edited payload.

    Returns:
        Custom labels safe to merge after the built-ins.
    """
    builtin_set = set(builtin)
    return tuple(label for label in dedupe_labels(custom) if label not in builtin_set)


def merge_categories(
    builtin: Sequence[CategoryName],
    custom: Sequence[CategoryName],
) -> tuple[CategoryName, ...]:
    """Return built-ins in their fixed order followed by custom labels."""
    return tuple(builtin) + tuple(custom)


def can_add_category(
    label: str,
    builtin: Sequence[CategoryName],
    custom: Sequence[CategoryName],
) -> bool:
    """Check whether a label would be a new custom category.

    Args:
        label: Candidate label (already normalized).
        builtin: Built-in category labels.
        custom: Existing custom labels.

    Returns:
        False for blank labels and labels already present, True otherwise.
    """
    if not label:
        return False
    return label not in builtin and label not in custom
