"""Work categories offered when naming a new branch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A work category: the label shown to the user and the code used in branch names."""

    display: str
    code: str

    def display_label(self) -> str:
        return self.display

    def filter_key(self) -> str:
        return self.display


CategoryRegistry = tuple[Category, ...]

DEFAULT_CATEGORIES: CategoryRegistry = (
    Category("CI/CD", "ci"),
    Category("Feature", "feat"),
    Category("Fix", "fix"),
    Category("Performance", "perf"),
    Category("Refactor", "refactor"),
    Category("Test", "test"),
)
