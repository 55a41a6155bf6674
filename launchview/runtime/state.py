from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..model import Launch


class View(Enum):
    LIST = "list"
    DETAIL = "detail"


@dataclass
class SessionState:
    """Everything the browser mutates while it runs.

    ``launches`` is handed in once, already sorted by NET, and never changes.
    Scroll offsets are kept per view; ``detail_scroll_offset`` is reset each
    time the detail view is entered.
    """

    launches: tuple[Launch, ...]
    use_local_time: bool = False
    active_view: View = View.LIST
    selected_index: int = 0
    list_scroll_offset: int = 0
    detail_scroll_offset: int = 0

    @property
    def last_index(self) -> int:
        return len(self.launches) - 1

    @property
    def selected_launch(self) -> Launch:
        return self.launches[self.selected_index]
