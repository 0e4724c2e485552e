"""Protocol for record ordering."""

from collections.abc import Sequence
from typing import Protocol

from gallery_core.data import Record


class RecordSorter(Protocol):
    """Interface for ordering gallery records."""

    def select_key_field(self, records: Sequence[Record]) -> str | None:
        """Name of the field ``sort`` would order by, or None for no reordering."""
        ...

    def sort(self, records: Sequence[Record]) -> list[Record]:
        """Return the records in display order.

        Args:
            records: Records in their original order.

        Returns:
            A new list holding every input record exactly once.
        """
        ...
