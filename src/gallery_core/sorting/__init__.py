"""Record ordering."""

from gallery_core.sorting.base import RecordSorter
from gallery_core.sorting.chronological import (
    CANDIDATE_FIELDS,
    ChronologicalSorter,
    KeyField,
    field_coverage,
    parse_count,
    required_coverage,
    select_key_field,
    sort_chronologically,
)

__all__ = [
    "CANDIDATE_FIELDS",
    "ChronologicalSorter",
    "KeyField",
    "RecordSorter",
    "field_coverage",
    "parse_count",
    "required_coverage",
    "select_key_field",
    "sort_chronologically",
]
