"""Textual application driving the branch picker."""

import logging
from typing import Optional

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from sprout.git import BranchListing, BranchSource, FetchError
from sprout.session import Direction, Session, Stage

logger = logging.getLogger(__name__)

BRANCH_HEADER = "📜 Select a branch:"
CATEGORY_HEADER = "🔧 Select a category:"
BRANCH_FOOTER = "↑/↓: navigate • enter: select • q: quit"
CATEGORY_FOOTER = "↑/↓: navigate • enter: confirm • q: quit"
QUIT_HINT = "Press q or Ctrl+C to quit."
LOADING_MESSAGE = "Loading branches..."

# Lines taken by the header and footer around the list
CHROME_HEIGHT = 5


class BranchesLoaded(Message):
    """The background fetch produced a branch listing."""

    def __init__(self, listing: BranchListing) -> None:
        super().__init__()
        self.listing = listing


class BranchesFailed(Message):
    """The background fetch failed."""

    def __init__(self, error: FetchError) -> None:
        super().__init__()
        self.error = error


def visible_window(length: int, index: int, height: Optional[int]) -> range:
    """Return the slice of list positions to draw so that ``index`` stays on screen."""
    if height is None or height <= 0 or length <= height:
        return range(length)
    start = min(max(0, index - height // 2), length - height)
    return range(start, start + height)


def render_session(session: Session, height: Optional[int] = None, loading: bool = False) -> Text:
    """Render the current stage (or the error view) as rich text."""
    text = Text()
    if session.last_error is not None:
        text.append("\n❌ Error: ", style="bold red")
        text.append(str(session.last_error))
        text.append(f"\n\n{QUIT_HINT}\n", style="dim")
        return text

    if session.stage is Stage.BRANCH_SELECTION:
        header, footer = BRANCH_HEADER, BRANCH_FOOTER
    else:
        header, footer = CATEGORY_HEADER, CATEGORY_FOOTER

    text.append(f"\n{header}\n\n", style="bold")
    items = session.active_list
    if loading and not len(items):
        text.append(f"  {LOADING_MESSAGE}\n", style="dim")
    for position in visible_window(len(items), items.index, height):
        label = items.items[position].display_label()
        if position == items.index:
            text.append(f"│ {label}\n", style="bold magenta")
        else:
            text.append(f"  {label}\n")
    text.append(f"\n{footer}\n", style="dim")
    return text


class SproutApp(App[Optional[str]]):
    """Full-screen picker. Exits with the created branch name, or None when cancelled."""

    BINDINGS = [
        Binding("up,k", "move_up", "Up", show=False),
        Binding("down,j", "move_down", "Down", show=False),
        Binding("home,g", "move_to_start", "First", show=False),
        Binding("end,G", "move_to_end", "Last", show=False),
        Binding("enter", "confirm", "Select"),
        Binding("q,escape", "quit_session", "Quit"),
        Binding("ctrl+c", "quit_session", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: Session, source: BranchSource) -> None:
        super().__init__()
        self._session = session
        self._source = source
        self._loading = True

    @property
    def session(self) -> Session:
        return self._session

    def compose(self) -> ComposeResult:
        yield Static(id="view")

    def on_mount(self) -> None:
        self._refresh_view()
        self._fetch_branches()

    def on_resize(self) -> None:
        self._refresh_view()

    @work(thread=True, exclusive=True, name="fetch-branches")
    def _fetch_branches(self) -> None:
        """Fetch branches off the event loop and report back as a message."""
        try:
            listing = self._source.fetch()
        except FetchError as err:
            self.post_message(BranchesFailed(err))
        else:
            self.post_message(BranchesLoaded(listing))

    def on_branches_loaded(self, message: BranchesLoaded) -> None:
        self._loading = False
        self._session.on_fetch_complete(message.listing.current, message.listing.branches)
        self._refresh_view()

    def on_branches_failed(self, message: BranchesFailed) -> None:
        self._loading = False
        self._session.on_fetch_failed(message.error)
        self._refresh_view()

    def action_move_up(self) -> None:
        self._session.move_selection(Direction.UP)
        self._refresh_view()

    def action_move_down(self) -> None:
        self._session.move_selection(Direction.DOWN)
        self._refresh_view()

    def action_move_to_start(self) -> None:
        self._session.move_to_start()
        self._refresh_view()

    def action_move_to_end(self) -> None:
        self._session.move_to_end()
        self._refresh_view()

    def action_confirm(self) -> None:
        self._session.confirm()
        if self._session.created_branch is not None:
            self.exit(self._session.created_branch)
            return
        self._refresh_view()

    def action_quit_session(self) -> None:
        self._session.cancel()
        self.exit(None)

    def _refresh_view(self) -> None:
        height = self.size.height - CHROME_HEIGHT if self.size.height else None
        # Resize can arrive before compose has mounted the view
        for view in self.query("#view").results(Static):
            view.update(render_session(self._session, height, self._loading))
