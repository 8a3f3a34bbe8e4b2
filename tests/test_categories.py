"""Tests for the category registry."""

from dataclasses import FrozenInstanceError

import pytest

from sprout.categories import DEFAULT_CATEGORIES, Category


def test_default_categories_in_display_order() -> None:
    """Test the registry contents and order."""
    assert [(category.display, category.code) for category in DEFAULT_CATEGORIES] == [
        ("CI/CD", "ci"),
        ("Feature", "feat"),
        ("Fix", "fix"),
        ("Performance", "perf"),
        ("Refactor", "refactor"),
        ("Test", "test"),
    ]


def test_categories_are_immutable() -> None:
    """Test that categories cannot be changed after creation."""
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CATEGORIES[0].code = "cd"  # type: ignore[misc]


def test_category_list_labels() -> None:
    """Test that categories are shown and filtered by their display name."""
    category = Category("Performance", "perf")
    assert category.display_label() == "Performance"
    assert category.filter_key() == "Performance"
