"""Test configuration and fixtures."""

from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo

AUTHOR = Actor("Test User", "test@example.com")


@pytest.fixture
def test_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a repository with branches committed at known dates.

    Branches, newest commit first: fix/recent, feature/old, main.
    The checked out branch is feature/old.
    """
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", AUTHOR.name).release()
    repo.config_writer().set_value("user", "email", AUTHOR.email).release()

    def commit(filename: str, date: str) -> None:
        (repo_path / filename).write_text(f"{filename} content")
        repo.index.add([filename])
        repo.index.commit(f"Add {filename}", author=AUTHOR, committer=AUTHOR, author_date=date, commit_date=date)

    commit("README.md", "2024-01-01T12:00:00")
    # Whatever the default branch is called, make it main
    repo.git.branch("-M", "main")

    repo.git.checkout("-b", "feature/old", "main")
    commit("old.txt", "2024-02-01T12:00:00")

    repo.git.checkout("-b", "fix/recent", "main")
    commit("recent.txt", "2024-03-01T12:00:00")

    repo.git.checkout("feature/old")

    yield repo_path
