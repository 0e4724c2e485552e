"""Chronological ordering of gallery records.

The sort key field is chosen per collection:

1. ``date``, as soon as any record carries a non-empty date.
2. Otherwise the first of ``sub1``, ``sub2``, ``title`` whose values parse as
   dates for at least ``max(2, ceil(0.8 * n))`` records.
3. Otherwise the records are left in their original order.

Once a field is chosen, records compare by the three-part key
(parseable first, timestamp ascending, original index ascending), so dated
records come first and undated ones keep their relative order at the end.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Literal

from gallery_core.data import Record
from gallery_core.dates import Timestamp, normalize_to_timestamp

logger = logging.getLogger(__name__)

KeyField = Literal["date", "sub1", "sub2", "title"]

# Fallback candidates, in priority order
CANDIDATE_FIELDS: tuple[KeyField, ...] = ("sub1", "sub2", "title")

COVERAGE_RATIO = 0.8
MIN_COVERAGE = 2


@dataclass(frozen=True)
class _SortEntry:
    record: Record
    timestamp: Timestamp | None


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def required_coverage(record_count: int) -> int:
    """Minimum number of parseable values for a fallback field to qualify."""
    return max(MIN_COVERAGE, math.ceil(COVERAGE_RATIO * record_count))


def parse_count(records: Sequence[Record], field: KeyField) -> int:
    """Number of records whose ``field`` reads as a date."""
    return sum(1 for r in records if normalize_to_timestamp(getattr(r, field)) is not None)


def field_coverage(records: Sequence[Record]) -> dict[KeyField, int]:
    """Parseable value counts for ``date`` and every fallback candidate."""
    return {name: parse_count(records, name) for name in ("date", *CANDIDATE_FIELDS)}


def select_key_field(records: Sequence[Record]) -> KeyField | None:
    """Pick the field to order by, or None to keep the original order."""
    if any(_has_value(r.date) for r in records):
        return "date"

    needed = required_coverage(len(records))
    for name in CANDIDATE_FIELDS:
        parsed = parse_count(records, name)
        logger.debug(f"Field {name!r}: {parsed}/{len(records)} parseable (need {needed})")
        if parsed >= needed:
            return name
    return None


def _compare(a: _SortEntry, b: _SortEntry) -> int:
    """Three-part comparison: parseability, then timestamp, then original index."""
    a_parsed = a.timestamp is not None
    b_parsed = b.timestamp is not None
    if a_parsed != b_parsed:
        return -1 if a_parsed else 1
    if a.timestamp is not None and b.timestamp is not None and a.timestamp != b.timestamp:
        return -1 if a.timestamp < b.timestamp else 1
    if a.record.index != b.record.index:
        return -1 if a.record.index < b.record.index else 1
    return 0


class ChronologicalSorter:
    """Order records by the best date-like field they share.

    Records are never mutated or dropped. Collections with fewer than two
    records, or without a field that qualifies as a date key, come back in
    their original order.
    """

    def select_key_field(self, records: Sequence[Record]) -> KeyField | None:
        """Field the next ``sort`` call would order by."""
        if len(records) < 2:
            return None
        return select_key_field(records)

    def sort(self, records: Sequence[Record]) -> list[Record]:
        """Return the records in chronological order.

        Args:
            records: Records in their original order.

        Returns:
            New list: parseable records ascending by timestamp (ties by
            original index), then unparseable records in original order.
        """
        key_field = self.select_key_field(records)
        if key_field is None:
            return list(records)

        entries = [
            _SortEntry(record=r, timestamp=normalize_to_timestamp(getattr(r, key_field)))
            for r in records
        ]
        parseable = sum(1 for e in entries if e.timestamp is not None)
        logger.debug(
            f"Sorting {len(entries)} records by {key_field!r} "
            f"({parseable} dated, {len(entries) - parseable} undated)"
        )

        entries.sort(key=cmp_to_key(_compare))
        return [e.record for e in entries]


def sort_chronologically(records: Sequence[Record]) -> list[Record]:
    """Order records chronologically with the default sorter."""
    return ChronologicalSorter().sort(records)
