"""Pure screen builders for the list and detail views."""

from .detail_view import render_detail_view
from .list_view import render_list_view
from .viewport import RenderResult, clamp_scroll, fit_to_rows, follow_selection, max_scroll_offset, visible_row_count

__all__ = [
    "RenderResult",
    "clamp_scroll",
    "fit_to_rows",
    "follow_selection",
    "max_scroll_offset",
    "render_detail_view",
    "render_list_view",
    "visible_row_count",
]
