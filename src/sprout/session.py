"""Two-stage selection flow: pick a starting branch, then a category, then create the branch."""

import logging
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, Protocol, Sequence, TypeVar

from sprout.categories import Category, CategoryRegistry
from sprout.git import BranchEntry, CreationError
from sprout.naming import synthesize

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Confirming the current selection failed."""


class EmptySelectionError(SelectionError):
    """Confirm was pressed with nothing to select."""


class ResolutionError(SelectionError):
    """The highlighted item could not be mapped back to its entry."""


class Stage(Enum):
    """Which list the user is currently choosing from."""

    BRANCH_SELECTION = "branch"
    CATEGORY_SELECTION = "category"


class Direction(Enum):
    """Cursor movement within the active list."""

    UP = -1
    DOWN = 1


class ListItem(Protocol):
    """Anything that can be shown in a selection list."""

    def display_label(self) -> str: ...

    def filter_key(self) -> str: ...


T = TypeVar("T", bound=ListItem)


class SelectionList(Generic[T]):
    """An ordered list of items with one highlighted position.

    The index always points at an item when the list is non-empty, and
    movement stops at either end instead of wrapping.
    """

    def __init__(self, items: Sequence[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._index = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def index(self) -> int:
        return self._index

    def set_items(self, items: Iterable[T], index: int = 0) -> None:
        """Replace the items and highlight ``index`` (clamped to the new list)."""
        self._items = tuple(items)
        self._index = 0
        self.select(index)

    def select(self, index: int) -> None:
        if not self._items:
            return
        self._index = max(0, min(index, len(self._items) - 1))

    def move(self, step: int) -> None:
        self.select(self._index + step)

    def move_to_start(self) -> None:
        self.select(0)

    def move_to_end(self) -> None:
        self.select(len(self._items) - 1)

    def selected(self) -> Optional[T]:
        """Return the highlighted item, or None for an empty list."""
        if not self._items:
            return None
        return self._items[self._index]


class Session:
    """State of one interactive branch creation run.

    The session starts in branch selection with empty lists. A successful
    confirm in branch selection records the chosen branch and moves to
    category selection; a successful confirm there creates the branch and
    sets ``created_branch``. Errors are recorded in ``last_error`` and never
    raised.

    Args:
        categories: Categories offered in the second stage, in display order
        create_branch: Creates and switches to the given branch name, raising
            CreationError on failure
        synthesize_name: Builds a branch name from a category code
    """

    def __init__(
        self,
        categories: CategoryRegistry,
        create_branch: Callable[[str], None],
        synthesize_name: Callable[[str], str] = synthesize,
    ) -> None:
        self._registry: CategoryRegistry = tuple(categories)
        self._create_branch = create_branch
        self._synthesize_name = synthesize_name

        self.stage = Stage.BRANCH_SELECTION
        self.branches: SelectionList[BranchEntry] = SelectionList()
        self.categories: SelectionList[Category] = SelectionList()
        self.chosen_branch: Optional[BranchEntry] = None
        self.last_error: Optional[Exception] = None
        self.created_branch: Optional[str] = None
        self.cancelled = False

    @property
    def finished(self) -> bool:
        return self.cancelled or self.created_branch is not None

    @property
    def active_list(self) -> SelectionList:
        if self.stage is Stage.BRANCH_SELECTION:
            return self.branches
        return self.categories

    def on_fetch_complete(self, current: Optional[str], branches: Iterable[BranchEntry]) -> None:
        """Populate the branch list and highlight the current branch if it is listed."""
        if self.stage is not Stage.BRANCH_SELECTION:
            logger.debug("Discarding branch list received in stage %s", self.stage.value)
            return

        entries = tuple(branches)
        index = 0
        if current is not None:
            index = next((i for i, entry in enumerate(entries) if entry.name == current), 0)
        self.branches.set_items(entries, index)

    def on_fetch_failed(self, err: Exception) -> None:
        logger.warning("Branch fetch failed: %s", err)
        self.last_error = err

    def move_selection(self, direction: Direction) -> None:
        self.active_list.move(direction.value)

    def move_to_start(self) -> None:
        self.active_list.move_to_start()

    def move_to_end(self) -> None:
        self.active_list.move_to_end()

    def confirm(self) -> None:
        """Confirm the highlighted item of the active stage."""
        if self.finished:
            return
        if self.stage is Stage.BRANCH_SELECTION:
            self._confirm_branch()
        else:
            self._confirm_category()

    def cancel(self) -> None:
        self.cancelled = True

    def _confirm_branch(self) -> None:
        if not self.branches:
            self.last_error = EmptySelectionError("no branches found")
            return

        selected = self.branches.selected()
        if not isinstance(selected, BranchEntry):
            self.last_error = ResolutionError("failed to get selected branch")
            return

        self.chosen_branch = selected
        self.categories.set_items(self._registry)
        self.last_error = None
        self.stage = Stage.CATEGORY_SELECTION
        logger.debug("Chose branch %s", selected.name)

    def _confirm_category(self) -> None:
        selected = self.categories.selected()
        if not isinstance(selected, Category):
            self.last_error = ResolutionError("failed to get selected category")
            return

        branch_name = self._synthesize_name(selected.code)
        try:
            self._create_branch(branch_name)
        except CreationError as err:
            logger.warning("Could not create %s: %s", branch_name, err)
            self.last_error = err
            return

        self.created_branch = branch_name
