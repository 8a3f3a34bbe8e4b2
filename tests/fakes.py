"""In-memory stand-ins for the git collaborator."""

from pathlib import Path
from typing import Optional

from sprout.git import BranchEntry, BranchListing, BranchSource, CreationError, FetchError


class FakeBranchSource(BranchSource):
    """BranchSource answering from memory.

    Args:
        branches: Branch names to report, newest first
        current: Name to report as the current branch
        fetch_error: Message of a FetchError to raise from fetch()
        creation_errors: Messages of CreationErrors raised by successive create_and_switch() calls
    """

    def __init__(
        self,
        branches: tuple[str, ...] = (),
        current: Optional[str] = None,
        fetch_error: Optional[str] = None,
        creation_errors: tuple[str, ...] = (),
    ) -> None:
        super().__init__(Path("."))
        self._branches = branches
        self._current = current
        self._fetch_error = fetch_error
        self._creation_errors = list(creation_errors)
        self.created: list[str] = []
        self.attempted: list[str] = []

    def fetch(self) -> BranchListing:
        if self._fetch_error is not None:
            raise FetchError(self._fetch_error)
        return BranchListing(current=self._current, branches=tuple(BranchEntry(name) for name in self._branches))

    def create_and_switch(self, branch_name: str) -> None:
        self.attempted.append(branch_name)
        if self._creation_errors:
            raise CreationError(self._creation_errors.pop(0))
        self.created.append(branch_name)
