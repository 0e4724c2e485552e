"""Turn heterogeneous date cells into UTC millisecond timestamps.

Supported shapes, tried in this order:

- ``date``/``datetime`` objects (naive values are read as UTC)
- numbers, classified by magnitude: epoch milliseconds, epoch seconds or
  spreadsheet serial days anchored at 1899-12-30
- ``D/M/Y`` strings (day first, 2 or 4 digit year, optional time)
- ``Y/M/D`` strings (optional ``T`` or space separated time)
- anything else ``dateutil`` can read, as long as the string fixes the year

Every failure yields ``None``; nothing here raises.
"""

import math
import re
import warnings
from datetime import UTC, date, datetime, timedelta

from dateutil import parser as date_parser
from dateutil.parser import UnknownTimezoneWarning

from gallery_core.dates.types import (
    NativeDateValue,
    NumericValue,
    TextValue,
    Timestamp,
    classify_value,
)

MS_PER_DAY = 86_400_000

# Numeric magnitude bands
EPOCH_MS_THRESHOLD = 1e12
EPOCH_SECONDS_THRESHOLD = 1e9
SERIAL_MIN = 20_000
SERIAL_MAX = 90_000

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

# 1899-12-30T00:00:00Z, day zero of spreadsheet serial dates
SERIAL_ANCHOR_MS = -2_209_161_600_000

_SEP = r"[/.\-]"
_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"

DAY_FIRST_RE = re.compile(
    rf"(?P<day>\d{{1,2}}){_SEP}(?P<month>\d{{1,2}}){_SEP}(?P<year>\d{{4}}|\d{{2}})"
    rf"(?:\s+{_TIME})?"
)

YEAR_FIRST_RE = re.compile(
    rf"(?P<year>\d{{4}}){_SEP}(?P<month>\d{{1,2}}){_SEP}(?P<day>\d{{1,2}})"
    rf"(?:[T\s]{_TIME})?"
)

_YEAR_LEAD_RE = re.compile(rf"\d{{4}}{_SEP}")

# Two reference defaults that differ only in the year: a fallback parse that
# depends on the default year did not get a year from the text.
_FALLBACK_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 1, 1))


def _datetime_to_ms(value: date) -> Timestamp | None:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    try:
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=UTC)
        return (value - _EPOCH) // _ONE_MS
    except (ValueError, OverflowError):
        # tzinfo whose offset is not strictly within one day
        return None


def _number_to_ms(value: float | int) -> Timestamp | None:
    try:
        magnitude = abs(float(value))
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(magnitude):
        return None

    if magnitude > EPOCH_MS_THRESHOLD:
        ms = round(value)
    elif magnitude > EPOCH_SECONDS_THRESHOLD:
        ms = round(value * 1000)
    elif SERIAL_MIN < magnitude < SERIAL_MAX:
        ms = round(SERIAL_ANCHOR_MS + value * MS_PER_DAY)
    else:
        return None
    return int(ms)


def _expand_year(token: str) -> int:
    year = int(token)
    if len(token) == 2:
        return 1900 + year if year >= 70 else 2000 + year
    return year


def _match_to_ms(m: re.Match[str]) -> Timestamp | None:
    try:
        dt = datetime(
            _expand_year(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour") or 0),
            int(m.group("minute") or 0),
            int(m.group("second") or 0),
        )
    except ValueError:
        return None
    return _datetime_to_ms(dt)


def _fallback_to_ms(text: str) -> Timestamp | None:
    # dateutil swaps month and day of ISO-like strings when dayfirst is set
    dayfirst = not _YEAR_LEAD_RE.match(text)
    parsed: list[datetime] = []
    for default in _FALLBACK_DEFAULTS:
        try:
            with warnings.catch_warnings():
                # unknown zone names such as "CET" are ignored
                warnings.simplefilter("ignore", UnknownTimezoneWarning)
                parsed.append(date_parser.parse(text, default=default, dayfirst=dayfirst))
        except (ValueError, OverflowError):
            return None
    first, second = parsed
    if first.year != second.year:
        return None
    return _datetime_to_ms(first)


def _text_to_ms(text: str) -> Timestamp | None:
    if not text:
        return None
    for pattern in (DAY_FIRST_RE, YEAR_FIRST_RE):
        m = pattern.fullmatch(text)
        if m:
            return _match_to_ms(m)
    return _fallback_to_ms(text)


def normalize_to_timestamp(value: object) -> Timestamp | None:
    """Convert a raw cell value into UTC epoch milliseconds.

    Args:
        value: Anything a host table cell can hold.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z, or None when the value
        cannot be read as a date.
    """
    tagged = classify_value(value)
    if isinstance(tagged, NativeDateValue):
        return _datetime_to_ms(tagged.value)
    if isinstance(tagged, NumericValue):
        return _number_to_ms(tagged.value)
    if isinstance(tagged, TextValue):
        return _text_to_ms(tagged.text)
    return None


def timestamp_to_datetime(ts: Timestamp) -> datetime:
    """Aware UTC datetime for a timestamp; raises OverflowError outside years 1..9999."""
    return _EPOCH + timedelta(milliseconds=ts)


def format_as_display_string(value: object) -> str:
    """Render a value as ``dd-mm-yyyy`` (UTC), or ``""`` if it is not a date."""
    ts = normalize_to_timestamp(value)
    if ts is None:
        return ""
    try:
        dt = timestamp_to_datetime(ts)
    except OverflowError:
        # valid timestamp, but outside the years datetime can show
        return ""
    return f"{dt.day:02d}-{dt.month:02d}-{dt.year:04d}"
