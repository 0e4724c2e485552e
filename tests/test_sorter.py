"""Tests for chronological record ordering."""

from datetime import date

import pytest

from gallery_core.data import Record
from gallery_core.sorting import (
    ChronologicalSorter,
    RecordSorter,
    field_coverage,
    parse_count,
    required_coverage,
    select_key_field,
    sort_chronologically,
)
from gallery_core.sorting.chronological import _compare, _SortEntry


def _records(**columns: list[object]) -> list[Record]:
    """Build records from per-field value lists; url is filled in."""
    n = max(len(v) for v in columns.values())
    out = []
    for i in range(n):
        fields = {name: values[i] for name, values in columns.items()}
        for text_field in ("title", "sub1", "sub2"):
            if fields.get(text_field) is None:
                fields[text_field] = ""
        out.append(Record(url=f"https://img.example/{i}.png", index=i, **fields))
    return out


def _order(records: list[Record]) -> list[int]:
    return [r.index for r in records]


# -- required_coverage --


@pytest.mark.parametrize(
    ("count", "needed"),
    [(0, 2), (1, 2), (2, 2), (3, 3), (4, 4), (5, 4), (10, 8), (11, 9)],
)
def test_required_coverage(count: int, needed: int) -> None:
    assert required_coverage(count) == needed


# -- coverage counts --


def test_parse_count_ignores_blank_and_junk() -> None:
    records = _records(sub1=["2023-01-01", "", "junk", "05/01/2023", None])
    assert parse_count(records, "sub1") == 2
    assert parse_count(records, "title") == 0


def test_field_coverage_lists_every_date_like_field() -> None:
    records = _records(
        date=[45000, "junk", None],
        sub1=["2023-01-01", "2023-01-02", "2023-01-03"],
        title=["Harbour", "1 March 2023", "Market"],
    )
    assert field_coverage(records) == {"date": 1, "sub1": 3, "sub2": 0, "title": 1}


# -- key field selection --


def test_any_date_wins_outright() -> None:
    records = _records(
        date=[None, "garbage", None],
        sub1=["2023-03-01", "2023-02-01", "2023-01-01"],
    )
    assert select_key_field(records) == "date"
    # every date is unparseable, so nothing moves even though sub1 would sort
    assert _order(sort_chronologically(records)) == [0, 1, 2]


def test_blank_date_strings_do_not_count() -> None:
    records = _records(
        date=["", "  ", None],
        sub1=["2023-03-01", "2023-02-01", "2023-01-01"],
    )
    assert select_key_field(records) == "sub1"
    assert _order(sort_chronologically(records)) == [2, 1, 0]


def test_numeric_zero_date_counts_as_present() -> None:
    records = _records(date=[0, None], sub1=["2023-02-01", "2023-01-01"])
    assert select_key_field(records) == "date"


def test_sub1_used_at_eighty_percent() -> None:
    records = _records(sub1=["2023-05-01", "junk", "2023-01-01", "2023-03-01", "2023-02-01"])
    assert select_key_field(records) == "sub1"
    assert _order(sort_chronologically(records)) == [2, 4, 3, 0, 1]


def test_below_threshold_keeps_original_order() -> None:
    records = _records(
        sub1=["2023-05-01", "junk", "2023-01-01", "nope", "2023-02-01"],
        sub2=["cat", "dog", "fox", "owl", "bee"],
        title=["red", "green", "blue", "gold", "pink"],
    )
    assert select_key_field(records) is None
    result = sort_chronologically(records)
    assert result == records


def test_sub2_checked_before_title() -> None:
    records = _records(
        sub1=["cat", "dog", "fox"],
        sub2=["03/01/2023", "01/01/2023", "02/01/2023"],
        title=["2020-01-01", "2021-01-01", "2019-01-01"],
    )
    assert select_key_field(records) == "sub2"
    assert _order(sort_chronologically(records)) == [1, 2, 0]


def test_title_as_last_candidate() -> None:
    records = _records(title=["2021-01-01", "2019-01-01", "2020-01-01"])
    assert select_key_field(records) == "title"
    assert _order(sort_chronologically(records)) == [1, 2, 0]


def test_two_records_need_both_parseable() -> None:
    assert select_key_field(_records(sub1=["2023-02-01", "2023-01-01"])) == "sub1"
    assert select_key_field(_records(sub1=["2023-02-01", "x"])) is None


def test_single_parseable_record_never_qualifies() -> None:
    records = _records(sub1=["2023-01-01"])
    assert select_key_field(records) is None


# -- ordering --


def test_fewer_than_two_records_is_noop() -> None:
    assert sort_chronologically([]) == []
    single = _records(date=["2023-01-01"])
    assert sort_chronologically(single) == single
    assert ChronologicalSorter().select_key_field(single) is None


def test_mixed_dates_parseable_first_then_original_order() -> None:
    records = _records(date=["junk", "2023-03-01", None, "01/01/2023", "", 1700000000])
    result = sort_chronologically(records)
    # parseable: 3 (2023-01-01), 1 (2023-03-01), 5 (2023-11-14); then 0, 2, 4
    assert _order(result) == [3, 1, 5, 0, 2, 4]


def test_heterogeneous_representations_compare_on_one_timeline() -> None:
    records = _records(
        date=[
            date(2023, 3, 15),
            "14/03/2023",
            45002,
            1678752000,
            "2023-03-13T12:00:00Z",
        ]
    )
    # 45002 -> 2023-03-17, 1678752000 -> 2023-03-14T00:00Z
    assert _order(sort_chronologically(records)) == [4, 1, 3, 0, 2]


def test_equal_timestamps_keep_relative_order() -> None:
    records = _records(date=["2023-01-02", "01/01/2023", "2023-01-01", "1.1.2023"])
    assert _order(sort_chronologically(records)) == [1, 2, 3, 0]


def test_ties_break_on_original_index_not_position() -> None:
    a = Record(url="a", date="2023-01-01", index=5)
    b = Record(url="b", date="2023-01-01", index=2)
    assert sort_chronologically([a, b]) == [b, a]


def test_unparseable_keep_relative_order() -> None:
    records = _records(date=["x", "2023-01-01", "y", "z"])
    assert _order(sort_chronologically(records)) == [1, 0, 2, 3]


def test_out_of_range_offset_sorts_as_unparseable() -> None:
    records = _records(date=["2023-01-05T10:00:00+25:00", "2023-01-01"])
    assert _order(sort_chronologically(records)) == [1, 0]


def test_far_future_epoch_values_stay_parseable() -> None:
    records = _records(date=["junk", 500_000_000_000, "2023-01-01", 500_000_000_000_000])
    # seconds and milliseconds spellings of the same instant tie on index
    assert _order(sort_chronologically(records)) == [2, 1, 3, 0]


def test_idempotent_on_sorted_input() -> None:
    records = _records(date=["2023-01-01", "2023-01-01", "2023-02-01", "junk", None])
    once = sort_chronologically(records)
    twice = sort_chronologically(once)
    assert twice == once
    assert all(x is y for x, y in zip(once, twice, strict=True))


def test_reverse_input_is_fully_sorted() -> None:
    dates = [f"2023-01-{d:02d}" for d in range(20, 0, -1)]
    result = sort_chronologically(_records(date=dates))
    assert _order(result) == list(range(19, -1, -1))


def test_input_not_mutated_and_nothing_dropped() -> None:
    records = _records(date=["2023-03-01", None, "2023-01-01"])
    snapshot = list(records)
    result = sort_chronologically(records)
    assert records == snapshot
    assert result is not records
    assert sorted(_order(result)) == [0, 1, 2]


def test_same_record_objects_returned() -> None:
    records = _records(date=["2023-03-01", "2023-01-01"])
    result = sort_chronologically(records)
    assert result[0] is records[1]
    assert result[1] is records[0]


# -- comparator --


def test_compare_three_parts() -> None:
    early = _SortEntry(Record(url="a", index=3), 100)
    late = _SortEntry(Record(url="b", index=0), 200)
    undated = _SortEntry(Record(url="c", index=1), None)
    undated_later = _SortEntry(Record(url="d", index=2), None)
    tie = _SortEntry(Record(url="e", index=4), 100)

    assert _compare(early, late) == -1
    assert _compare(late, early) == 1
    assert _compare(late, undated) == -1
    assert _compare(undated, early) == 1
    assert _compare(undated, undated_later) == -1
    assert _compare(early, tie) == -1
    assert _compare(early, early) == 0


# -- protocol --


def test_chronological_sorter_matches_protocol() -> None:
    sorter: RecordSorter = ChronologicalSorter()
    assert callable(sorter.sort)
    assert callable(sorter.select_key_field)
