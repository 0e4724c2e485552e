"""Core data models for the gallery."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ViewMode(StrEnum):
    """How the gallery lays out its cards."""

    CAROUSEL = "carousel"
    GRID = "grid"


class TextPosition(StrEnum):
    """Where a card's title and subtitle sit relative to its image."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    OVERLAY_TOP = "overlayTop"
    OVERLAY_BOTTOM = "overlayBottom"
    HIDDEN = "hidden"


class Role(StrEnum):
    """Data roles a host table column can be bound to."""

    IMAGE_URL = "imageUrl"
    TITLE = "title"
    SUB1 = "sub1"
    SUB2 = "sub2"
    DATE = "date"


@dataclass(frozen=True)
class Record:
    """One displayable gallery item.

    ``date`` keeps the raw cell value (absent, numeric, string or a native
    ``date``/``datetime``). ``index`` is the record's original position and is
    only used to break ties when sorting.
    """

    url: str
    title: str = ""
    sub1: str = ""
    sub2: str = ""
    date: Any = None
    index: int = 0


@dataclass(frozen=True)
class TableColumn:
    """A host table column and the roles bound to it."""

    name: str
    roles: frozenset[str] = frozenset()


@dataclass(frozen=True)
class DataTable:
    """Table-shaped data handed over by the host panel."""

    columns: tuple[TableColumn, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()


@dataclass(frozen=True)
class ValueColumn:
    """A categorical value column: its roles and one value per category."""

    roles: frozenset[str]
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class GalleryResult:
    """Records ready for display plus the field they were ordered by."""

    records: list[Record] = field(default_factory=list)
    key_field: str | None = None
    dropped_rows: int = 0
