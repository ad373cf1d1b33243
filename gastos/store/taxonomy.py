"""Category taxonomy backed by a key-value store."""

import logging
from collections.abc import Sequence

from gastos.domain.categories import (
    BUILTIN_CATEGORIES,
    UnknownCategoryPolicy,
    can_add_category,
    clean_custom_labels,
    dedupe_labels,
    merge_categories,
    normalize_label,
)
from gastos.domain.models import CategoryName
from gastos.errors import InvalidExpenseError, PersistenceError
from gastos.store.codec import decode_categories, encode_categories
from gastos.store.kv import CATEGORIES_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class Taxonomy:
    """Fixed built-in categories plus user-added custom categories.

    Custom categories are loaded from the store on creation and written back
    after every addition. Only custom labels are persisted.
    """

    def __init__(
        self,
        store: KeyValueStore,
        builtin: Sequence[str] = BUILTIN_CATEGORIES,
    ) -> None:
        self._store = store
        self._builtin = dedupe_labels(builtin)
        self._custom: list[CategoryName] = list(self._load())

    def _load(self) -> tuple[CategoryName, ...]:
        text = self._store.load(CATEGORIES_KEY)
        if text is None:
            return ()
        try:
            labels = decode_categories(text)
        except ValueError as e:
            logger.warning("Ignoring unreadable custom categories: %s", e)
            return ()
        return clean_custom_labels(self._builtin, labels)

    @property
    def builtin_categories(self) -> tuple[CategoryName, ...]:
        return self._builtin

    @property
    def custom_categories(self) -> tuple[CategoryName, ...]:
        return tuple(self._custom)

    def list_categories(self) -> tuple[CategoryName, ...]:
        """Built-in categories in their fixed order, then custom ones in insertion order."""
        return merge_categories(self._builtin, self._custom)

    def is_known(self, label: str) -> bool:
        normalized = normalize_label(label)
        return normalized in self._builtin or normalized in self._custom

    def add_category(self, label: str) -> bool:
        """Add a custom category.

        Blank labels and labels already present are ignored.

        Args:
            label: Category label.

        Returns:
            True if the label was added, False if nothing changed.

        Raises:
            PersistenceError: If the store rejects the write (the label is not kept).
        """
        normalized = normalize_label(label)
        if not can_add_category(normalized, self._builtin, self._custom):
            return False

        self._custom.append(CategoryName(normalized))
        if not self._store.save(CATEGORIES_KEY, encode_categories(self._custom)):
            self._custom.pop()
            raise PersistenceError(f"Could not save category '{normalized}'")

        logger.debug("Added custom category %r", normalized)
        return True

    def check(self, label: str, policy: UnknownCategoryPolicy = "accept") -> CategoryName:
        """Validate a label for a new expense without changing the taxonomy.

        Raises:
            InvalidExpenseError: If the label is blank, or unknown under "reject".
        """
        if not isinstance(label, str):
            raise InvalidExpenseError(f"Category must be a string, got {label!r}")

        normalized = normalize_label(label)
        if not normalized:
            raise InvalidExpenseError("Category must not be empty")

        if not self.is_known(normalized):
            if policy == "reject":
                raise InvalidExpenseError(f"Unknown category '{normalized}'")
            if policy == "accept":
                logger.info("Accepting expense with unregistered category %r", normalized)

        return CategoryName(normalized)

    def resolve(self, label: str, policy: UnknownCategoryPolicy = "accept") -> CategoryName:
        """Turn a user-supplied label into a category for a new expense.

        Args:
            label: Category label.
            policy: What to do when the label is not in the taxonomy:
                "accept" keeps it without registering it, "register" adds it as
                a custom category, "reject" raises.

        Returns:
            The normalized category name.

        Raises:
            InvalidExpenseError: If the label is blank, or unknown under "reject".
            PersistenceError: If registering the label fails.
        """
        category = self.check(label, policy)
        if policy == "register":
            self.add_category(category)
        return category
