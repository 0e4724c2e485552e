"""Date normalization for loosely typed gallery cells."""

from gallery_core.dates.normalizer import (
    format_as_display_string,
    normalize_to_timestamp,
    timestamp_to_datetime,
)
from gallery_core.dates.types import (
    AbsentValue,
    DateInput,
    NativeDateValue,
    NumericValue,
    TextValue,
    Timestamp,
    UnsupportedValue,
    classify_value,
)

__all__ = [
    "AbsentValue",
    "DateInput",
    "NativeDateValue",
    "NumericValue",
    "TextValue",
    "Timestamp",
    "UnsupportedValue",
    "classify_value",
    "format_as_display_string",
    "normalize_to_timestamp",
    "timestamp_to_datetime",
]
