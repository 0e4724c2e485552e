"""Gallery preparation pipeline: read, order, apply the date display policy."""

import dataclasses
import logging
import time
from collections.abc import Sequence
from typing import Any

from gallery_core.data import DataTable, GalleryResult, Record, Role, ValueColumn
from gallery_core.dates import format_as_display_string
from gallery_core.reader import has_date_role, read_categorical, read_table
from gallery_core.run_logger import RunLogger
from gallery_core.sorting import ChronologicalSorter, RecordSorter, field_coverage, required_coverage

logger = logging.getLogger(__name__)


def apply_date_display(records: Sequence[Record]) -> list[Record]:
    """Replace ``sub2`` with the ``dd-mm-yyyy`` rendering of each record's date.

    Records whose date does not render keep their original ``sub2``.
    """
    out: list[Record] = []
    for record in records:
        rendered = format_as_display_string(record.date)
        out.append(dataclasses.replace(record, sub2=rendered) if rendered else record)
    return out


class GalleryPipeline:
    """Turns host rows into display-ordered gallery records.

    Flow:
    1. Rows are read into records (blank URLs dropped)
    2. The sorter orders them chronologically
    3. When a date column is bound, ``sub2`` shows the rendered date

    Args:
        sorter: Record sorter (defaults to ChronologicalSorter).
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        sorter: RecordSorter | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._sorter = sorter or ChronologicalSorter()
        self._run_logger = run_logger

    def run(self, table: DataTable, *, source: str = "table") -> GalleryResult:
        """Prepare a role-tagged table.

        Args:
            table: Host table.
            source: Label recorded in the run log.

        Returns:
            GalleryResult with ordered records.
        """
        if self._run_logger:
            self._run_logger.start_run(source)

        t0 = time.monotonic()
        records = read_table(table)
        self._log_stage(
            "read",
            "read_table",
            {"row_count": len(table.rows)},
            {"record_count": len(records)},
            time.monotonic() - t0,
        )
        return self._finish(records, len(table.rows), date_bound=has_date_role(table))

    def run_categorical(
        self,
        urls: Sequence[Any],
        values: Sequence[ValueColumn],
        *,
        source: str = "categorical",
    ) -> GalleryResult:
        """Prepare the categorical data shape."""
        if self._run_logger:
            self._run_logger.start_run(source)

        t0 = time.monotonic()
        records = read_categorical(urls, values)
        self._log_stage(
            "read",
            "read_categorical",
            {"row_count": len(urls)},
            {"record_count": len(records)},
            time.monotonic() - t0,
        )
        date_bound = any(Role.DATE in column.roles for column in values)
        return self._finish(records, len(urls), date_bound=date_bound)

    def _finish(self, records: list[Record], row_count: int, *, date_bound: bool) -> GalleryResult:
        dropped = row_count - len(records)
        if dropped:
            logger.info(f"Dropped {dropped} row(s) without an image URL")

        t0 = time.monotonic()
        key_field = self._sorter.select_key_field(records)
        ordered = self._sorter.sort(records)
        self._log_stage(
            "sort",
            type(self._sorter).__name__,
            {"record_count": len(records), "required_coverage": required_coverage(len(records))},
            {"key_field": key_field, "order": [r.index for r in ordered]},
            time.monotonic() - t0,
        )

        if date_bound:
            t0 = time.monotonic()
            ordered = apply_date_display(ordered)
            self._log_stage(
                "format",
                "apply_date_display",
                None,
                [r.sub2 for r in ordered],
                time.monotonic() - t0,
            )

        logger.debug(f"Prepared {len(ordered)} records (key field: {key_field})")
        result = GalleryResult(records=ordered, key_field=key_field, dropped_rows=dropped)
        if self._run_logger and self._run_logger.enabled:
            self._run_logger.finish_run(result, field_coverage(records))
        return result

    def _log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                stage=stage,
                component=component,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=duration_seconds,
            )


def prepare_gallery(table: DataTable) -> GalleryResult:
    """Read, order and format a table with the default pipeline."""
    return GalleryPipeline().run(table)
