"""Run logger for recording gallery preparation stages to JSON files."""

import dataclasses
import uuid
from collections.abc import Mapping
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from gallery_core.data import GalleryResult


class StageRecord(BaseModel):
    """Record of a single preparation stage."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete gallery preparation run.

    ``field_coverage`` maps each date-like field to the number of records
    whose value in it parses as a date.
    """

    run_id: str
    source: str
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    row_count: int = 0
    dropped_rows: int = 0
    record_count: int = 0
    key_field: str | None = None
    field_coverage: dict[str, int] = {}


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, lists, tuples, dicts, dates,
    paths and primitives. Anything else becomes its ``repr``.
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((_serialize(item) for item in obj), key=str)
    if isinstance(obj, dict):
        return {str(k): _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return repr(obj)


class RunLogger:
    """Accumulates stage records and writes a JSON log file per run.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, source: str) -> None:
        """Initialize a new run record.

        Args:
            source: Where the rows came from (e.g. "table", a CSV path).
        """
        if not self._enabled:
            return

        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            source=source,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "read", "sort", "format").
            component: Component class or function name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or self._record is None:
            return

        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        result: GalleryResult,
        field_coverage: Mapping[str, int] | None = None,
    ) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            result: Gallery handed to the view.
            field_coverage: Parseable value count per date-like field.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.row_count = len(result.records) + result.dropped_rows
        self._record.dropped_rows = result.dropped_rows
        self._record.record_count = len(result.records)
        self._record.key_field = result.key_field
        self._record.field_coverage = dict(field_coverage or {})

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00_<id>.json (colons are not filesystem-safe)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"run_{ts}_{self._record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
