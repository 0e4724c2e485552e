"""Carousel and grid navigation state for the gallery.

The view holds only navigation state (carousel index, grid page and the
user's mode override) and turns ordered records into a ``GalleryFrame`` the
presentation layer can draw.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from gallery_core.data import Record, TextPosition, ViewMode

GRID_MIN = 1
GRID_MAX = 10
DEFAULT_GRID_ROWS = 2
DEFAULT_GRID_COLS = 3

_OVERLAY_POSITIONS = (TextPosition.OVERLAY_TOP, TextPosition.OVERLAY_BOTTOM)


def clamp_grid(value: int | None, default: int) -> int:
    """Clamp a grid dimension to 1..10; zero or missing uses ``default``."""
    return max(GRID_MIN, min(GRID_MAX, value or default))


def subtitle_for(record: Record) -> str:
    """Join the non-empty trimmed subtitles with ``" | "``."""
    parts = [p.strip() for p in (record.sub1, record.sub2)]
    return " | ".join(p for p in parts if p)


@dataclass(frozen=True)
class CardView:
    """What a single card shows."""

    record: Record
    image_url: str
    title: str
    subtitle: str
    text_position: TextPosition
    show_text: bool
    overlay: bool


@dataclass(frozen=True)
class GalleryFrame:
    """One rendered state of the gallery."""

    mode: ViewMode
    cards: list[CardView] = field(default_factory=list)
    counter: str = ""
    show_navigation: bool = False
    show_mode_toggle: bool = False
    grid_rows: int = DEFAULT_GRID_ROWS
    grid_cols: int = DEFAULT_GRID_COLS


class GalleryView:
    """Navigation state for the carousel and grid modes.

    Args:
        view_mode: Configured mode.
        show_mode_toggle: Whether the user may switch modes. A user override
            only takes effect while the toggle is shown.
        text_position: Where card text sits.
        grid_rows: Rows per grid page (clamped to 1..10).
        grid_cols: Columns per grid page (clamped to 1..10).
    """

    def __init__(
        self,
        view_mode: ViewMode = ViewMode.CAROUSEL,
        *,
        show_mode_toggle: bool = True,
        text_position: TextPosition = TextPosition.TOP,
        grid_rows: int = DEFAULT_GRID_ROWS,
        grid_cols: int = DEFAULT_GRID_COLS,
    ) -> None:
        self._view_mode = ViewMode(view_mode)
        self._show_toggle = show_mode_toggle
        self._text_position = TextPosition(text_position)
        self._grid_rows = clamp_grid(grid_rows, DEFAULT_GRID_ROWS)
        self._grid_cols = clamp_grid(grid_cols, DEFAULT_GRID_COLS)
        self.current_index = 0
        self.current_page = 0
        self.user_mode: ViewMode | None = None

    @property
    def mode(self) -> ViewMode:
        """Mode in effect: the user's choice if the toggle is shown, else the configured one."""
        if self._show_toggle and self.user_mode is not None:
            return self.user_mode
        return self._view_mode

    @property
    def page_size(self) -> int:
        return self._grid_rows * self._grid_cols

    def total_pages(self, count: int) -> int:
        return max(1, math.ceil(count / self.page_size))

    def set_mode(self, mode: ViewMode | str) -> None:
        """Record the user's mode choice from the toggle."""
        self.user_mode = ViewMode(mode)

    def next(self, count: int) -> None:
        """Advance one card (carousel) or one page (grid), wrapping around."""
        if self.mode == ViewMode.CAROUSEL:
            self.current_index = self.current_index + 1 if self.current_index < count - 1 else 0
        else:
            total = self.total_pages(count)
            self.current_page = self.current_page + 1 if self.current_page < total - 1 else 0

    def previous(self, count: int) -> None:
        """Step back one card or page, wrapping to the end."""
        if self.mode == ViewMode.CAROUSEL:
            self.current_index = self.current_index - 1 if self.current_index > 0 else max(0, count - 1)
        else:
            total = self.total_pages(count)
            self.current_page = self.current_page - 1 if self.current_page > 0 else total - 1

    def card(self, record: Record) -> CardView:
        pos = self._text_position
        return CardView(
            record=record,
            image_url=record.url,
            title=record.title,
            subtitle=subtitle_for(record),
            text_position=pos,
            show_text=pos != TextPosition.HIDDEN,
            overlay=pos in _OVERLAY_POSITIONS,
        )

    def render(self, records: Sequence[Record]) -> GalleryFrame:
        """Build the frame for the current state, clamping stale positions."""
        count = len(records)
        if self.current_index >= count:
            self.current_index = 0

        if self.mode == ViewMode.CAROUSEL:
            self.current_page = 0
            cards = [self.card(records[self.current_index])] if count else []
            return GalleryFrame(
                mode=ViewMode.CAROUSEL,
                cards=cards,
                counter=f"{self.current_index + 1}/{max(1, count)}",
                show_navigation=True,
                show_mode_toggle=self._show_toggle,
                grid_rows=self._grid_rows,
                grid_cols=self._grid_cols,
            )

        total = self.total_pages(count)
        self.current_page = max(0, min(self.current_page, total - 1))
        start = self.current_page * self.page_size
        return GalleryFrame(
            mode=ViewMode.GRID,
            cards=[self.card(r) for r in records[start : start + self.page_size]],
            counter=f"{self.current_page + 1}/{total}",
            show_navigation=total > 1,
            show_mode_toggle=self._show_toggle,
            grid_rows=self._grid_rows,
            grid_cols=self._grid_cols,
        )
