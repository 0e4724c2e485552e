"""Tests for reading records from host data shapes."""

from datetime import date

from gallery_core.data import DataTable, Record, Role, TableColumn, ValueColumn
from gallery_core.reader import column_index, has_date_role, read_categorical, read_table


def _table(rows: list[tuple[object, ...]], *, with_date: bool = True) -> DataTable:
    columns = [
        TableColumn(name="Image", roles=frozenset({Role.IMAGE_URL})),
        TableColumn(name="Name", roles=frozenset({Role.TITLE})),
        TableColumn(name="Place", roles=frozenset({Role.SUB1})),
        TableColumn(name="Note", roles=frozenset({Role.SUB2})),
    ]
    if with_date:
        columns.append(TableColumn(name="Taken", roles=frozenset({Role.DATE})))
    return DataTable(columns=tuple(columns), rows=tuple(rows))


def test_column_index_by_role() -> None:
    table = _table([])
    assert column_index(table, Role.IMAGE_URL) == 0
    assert column_index(table, Role.DATE) == 4
    assert column_index(table, "missing") == -1


def test_has_date_role() -> None:
    assert has_date_role(_table([]))
    assert not has_date_role(_table([], with_date=False))


def test_read_table_basic() -> None:
    taken = date(2023, 1, 5)
    table = _table([("https://img/1.png", "One", "Lisbon", "note", taken)])
    assert read_table(table) == [
        Record(url="https://img/1.png", title="One", sub1="Lisbon", sub2="note", date=taken, index=0)
    ]


def test_read_table_keeps_date_raw_and_coerces_text() -> None:
    table = _table([("https://img/1.png", None, 42, None, 45000)])
    record = read_table(table)[0]
    assert record.title == ""
    assert record.sub1 == "42"
    assert record.sub2 == ""
    assert record.date == 45000


def test_read_table_drops_blank_urls_and_reindexes() -> None:
    table = _table(
        [
            ("  ", "skip", "", "", None),
            ("https://img/1.png", "a", "", "", None),
            (None, "skip", "", "", None),
            ("https://img/2.png", "b", "", "", None),
        ]
    )
    records = read_table(table)
    assert [r.title for r in records] == ["a", "b"]
    assert [r.index for r in records] == [0, 1]


def test_read_table_missing_roles() -> None:
    table = DataTable(
        columns=(TableColumn(name="url", roles=frozenset({Role.IMAGE_URL})),),
        rows=(("https://img/1.png",),),
    )
    record = read_table(table)[0]
    assert record.title == ""
    assert record.date is None


def test_read_table_short_rows() -> None:
    table = _table([("https://img/1.png", "One")])
    record = read_table(table)[0]
    assert record.sub1 == ""
    assert record.date is None


def test_first_column_with_role_wins() -> None:
    table = DataTable(
        columns=(
            TableColumn(name="a", roles=frozenset({Role.IMAGE_URL})),
            TableColumn(name="b", roles=frozenset({Role.TITLE})),
            TableColumn(name="c", roles=frozenset({Role.TITLE})),
        ),
        rows=(("https://img/1.png", "first", "second"),),
    )
    assert read_table(table)[0].title == "first"


def test_read_categorical() -> None:
    urls = ["https://img/1.png", "", "https://img/3.png"]
    values = [
        ValueColumn(roles=frozenset({Role.TITLE}), values=("One", "Two", "Three")),
        ValueColumn(roles=frozenset({Role.SUB2}), values=("x", "y")),
        ValueColumn(roles=frozenset({Role.DATE}), values=("2023-01-01", None, "2022-01-01")),
    ]
    records = read_categorical(urls, values)
    assert [r.title for r in records] == ["One", "Three"]
    assert [r.sub2 for r in records] == ["x", ""]
    assert [r.date for r in records] == ["2023-01-01", "2022-01-01"]
    assert [r.index for r in records] == [0, 1]


def test_read_categorical_without_values() -> None:
    records = read_categorical(["https://img/1.png"], [])
    assert records == [Record(url="https://img/1.png")]
