"""TUI runner abstraction so the CLI can be tested without starting the Textual event loop."""

from abc import ABC, abstractmethod
from typing import Optional

from sprout.tui import SproutApp


class TuiCrashError(Exception):
    """The picker stopped on an unhandled error instead of exiting normally."""


class TuiRunner(ABC):
    """Abstract interface for running the picker."""

    @abstractmethod
    def run(self, app: SproutApp) -> Optional[str]:
        """Run the picker and return the created branch name, or None if the user quit."""
        ...


class RealTuiRunner(TuiRunner):
    """Runs the Textual event loop."""

    def run(self, app: SproutApp) -> Optional[str]:
        result = app.run()
        # Textual reports an unhandled exception as return_code 1 with no return value
        if app.return_code:
            raise TuiCrashError(f"picker exited with code {app.return_code}")
        return result


class FakeTuiRunner(TuiRunner):
    """Captures apps without running them and returns a canned result.

    Args:
        result: Branch name to report as created, or None for a cancelled run
        error: Exception to raise instead, simulating a terminal startup failure
    """

    def __init__(self, result: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self._result = result
        self._error = error
        self._apps_run: list[SproutApp] = []

    def run(self, app: SproutApp) -> Optional[str]:
        self._apps_run.append(app)
        if self._error is not None:
            raise self._error
        return self._result

    @property
    def apps_run(self) -> list[SproutApp]:
        """Apps passed to run(), for test assertions."""
        return self._apps_run
