"""Build gallery records from host data shapes."""

from collections.abc import Sequence
from typing import Any

from gallery_core.data import DataTable, Record, Role, ValueColumn


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _cell(row: Sequence[Any], index: int) -> Any:
    if index < 0 or index >= len(row):
        return None
    return row[index]


def column_index(table: DataTable, role: str) -> int:
    """Index of the first column bound to ``role``, or -1."""
    for i, column in enumerate(table.columns):
        if role in column.roles:
            return i
    return -1


def has_date_role(table: DataTable) -> bool:
    """Whether the host bound a column to the date role."""
    return column_index(table, Role.DATE) >= 0


def _keep(records: list[Record], *, url: str, title: str, sub1: str, sub2: str, date: Any) -> None:
    if not url.strip():
        return
    records.append(Record(url=url, title=title, sub1=sub1, sub2=sub2, date=date, index=len(records)))


def read_table(table: DataTable) -> list[Record]:
    """Read records from a role-tagged table.

    Text cells are coerced to strings (null becomes ``""``); the date cell is
    kept as-is. Rows whose URL is blank are dropped, and ``index`` counts
    only the rows that were kept.
    """
    idx = {role: column_index(table, role) for role in Role}

    records: list[Record] = []
    for row in table.rows:
        _keep(
            records,
            url=_text(_cell(row, idx[Role.IMAGE_URL])),
            title=_text(_cell(row, idx[Role.TITLE])),
            sub1=_text(_cell(row, idx[Role.SUB1])),
            sub2=_text(_cell(row, idx[Role.SUB2])),
            date=_cell(row, idx[Role.DATE]),
        )

    return records


def read_categorical(urls: Sequence[Any], values: Sequence[ValueColumn]) -> list[Record]:
    """Read records from the categorical shape.

    ``urls`` is the image URL category; every other field comes from the
    first value column bound to its role.
    """

    def lookup(role: str) -> Sequence[Any]:
        for column in values:
            if role in column.roles:
                return column.values
        return ()

    titles = lookup(Role.TITLE)
    subs1 = lookup(Role.SUB1)
    subs2 = lookup(Role.SUB2)
    dates = lookup(Role.DATE)

    records: list[Record] = []
    for i, url in enumerate(urls):
        _keep(
            records,
            url=_text(url),
            title=_text(_cell(titles, i)),
            sub1=_text(_cell(subs1, i)),
            sub2=_text(_cell(subs2, i)),
            date=_cell(dates, i),
        )
    return records
