"""Tagged variants for loosely typed date cells."""

from dataclasses import dataclass
from datetime import date
from numbers import Real
from typing import Any

# Milliseconds since the Unix epoch (UTC). ``None`` stands for "unparseable".
Timestamp = int


@dataclass(frozen=True)
class AbsentValue:
    """No value at all (a null cell)."""


@dataclass(frozen=True)
class NativeDateValue:
    """A ``date`` or ``datetime`` object."""

    value: date


@dataclass(frozen=True)
class NumericValue:
    """An epoch or spreadsheet-serial number."""

    value: Real


@dataclass(frozen=True)
class TextValue:
    """A string, already trimmed."""

    text: str


@dataclass(frozen=True)
class UnsupportedValue:
    """Anything else (booleans, containers, arbitrary objects)."""

    value: Any


DateInput = AbsentValue | NativeDateValue | NumericValue | TextValue | UnsupportedValue


def classify_value(value: Any) -> DateInput:
    """Tag a raw cell value with the variant the normalizer handles it as.

    ``bool`` is a subclass of ``int`` but is never treated as a number.
    """
    if value is None:
        return AbsentValue()
    if isinstance(value, date):
        return NativeDateValue(value)
    if isinstance(value, bool):
        return UnsupportedValue(value)
    if isinstance(value, Real):
        return NumericValue(value)
    if isinstance(value, str):
        return TextValue(value.strip())
    return UnsupportedValue(value)
