"""Git repository operations."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git import InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import CommandError

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Git operation error."""


class FetchError(GitError):
    """Listing local branches failed."""


class CreationError(GitError):
    """Creating or switching to a new branch failed."""


@dataclass(frozen=True)
class BranchEntry:
    """A local branch as listed by git."""

    name: str

    def display_label(self) -> str:
        return self.name

    def filter_key(self) -> str:
        return self.name


@dataclass(frozen=True)
class BranchListing:
    """Result of a branch fetch: the current branch (if known) and all local branches, newest first."""

    current: Optional[str]
    branches: tuple[BranchEntry, ...]


def git_message(err: CommandError) -> str:
    """Extract git's own error text from a CommandError."""
    stderr = err.stderr.strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:") :].strip().strip("'")
    return stderr.strip() or str(err)


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
            if self.repo.bare:
                raise GitError("Cannot operate on bare repository")
        except (InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError(f"Failed to open repository: not a git repository: {err}") from err
        except (CommandError, ValueError) as err:
            raise GitError(f"Failed to open repository: {err}") from err

    def get_current_branch_name(self) -> Optional[str]:
        """Get current branch name, or None when it cannot be determined.

        A detached HEAD or any git failure means "no current branch known";
        this never raises.
        """
        try:
            return self.repo.active_branch.name
        except TypeError:
            # Detached HEAD
            return None
        except (CommandError, ValueError) as err:
            logger.debug("Could not determine current branch: %s", err)
            return None

    def list_branches_by_recency(self) -> list[str]:
        """List local branch names, most recently committed first.

        Raises:
            FetchError: If git cannot list the branches
        """
        try:
            output = self.repo.git.for_each_ref(
                "--sort=-committerdate",
                "refs/heads/",
                "--format=%(refname:short)",
            )
        except CommandError as err:
            raise FetchError(f"Failed to list branches: {git_message(err)}") from err
        return [line.strip() for line in output.splitlines() if line.strip()]

    def create_and_switch(self, branch_name: str) -> None:
        """Create a branch at the current checkout position and switch to it.

        Raises:
            CreationError: If git refuses (name exists, invalid name, ...)
        """
        try:
            self.repo.git.checkout("-b", branch_name)
        except CommandError as err:
            raise CreationError(f"Failed to create branch: {git_message(err)}") from err


class BranchSource:
    """Opens the repository at ``path`` on demand and answers the questions the picker asks."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def fetch(self) -> BranchListing:
        """Fetch the current branch and all local branches.

        The current branch lookup is best effort. Failing to open the
        repository or to list branches raises FetchError.
        """
        logger.debug("Fetching branches from %s", self.path)
        try:
            repo = GitRepo(self.path)
        except GitError as err:
            raise FetchError(str(err)) from err

        current = repo.get_current_branch_name()
        names = repo.list_branches_by_recency()
        logger.info("Found %d local branch(es), current: %s", len(names), current or "unknown")
        return BranchListing(current=current, branches=tuple(BranchEntry(name) for name in names))

    def create_and_switch(self, branch_name: str) -> None:
        """Create and switch to ``branch_name`` in the repository at ``path``."""
        logger.info("Creating branch %s in %s", branch_name, self.path)
        try:
            repo = GitRepo(self.path)
        except GitError as err:
            raise CreationError(str(err)) from err
        repo.create_and_switch(branch_name)
