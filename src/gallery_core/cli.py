"""CLI for ordering gallery rows from a CSV file."""

import argparse
import csv
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from gallery_core.config import create_from_config, get_default_config_path, load_config
from gallery_core.data import DataTable, Role, TableColumn, ViewMode

logger = logging.getLogger(__name__)

# CSV header aliases for each role
HEADER_ROLES: dict[str, Role] = {
    "url": Role.IMAGE_URL,
    "imageurl": Role.IMAGE_URL,
    "image_url": Role.IMAGE_URL,
    "title": Role.TITLE,
    "sub1": Role.SUB1,
    "sub2": Role.SUB2,
    "date": Role.DATE,
}


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    rows: Path
    config: Path
    mode: ViewMode | None = None
    log: bool = False
    log_dir: str = "logs"

    @field_validator("rows", "config")
    @classmethod
    def file_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


def read_csv_table(path: Path) -> DataTable:
    """Load a CSV file as a table, binding columns to roles by header name."""
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, [])
        rows = tuple(tuple(row) for row in reader)

    columns = []
    for name in header:
        role = HEADER_ROLES.get(name.strip().lower())
        columns.append(TableColumn(name=name, roles=frozenset({role}) if role else frozenset()))
    return DataTable(columns=tuple(columns), rows=rows)


def run(args: CLIArgs) -> None:
    """Order the rows and print the gallery.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    if args.mode is not None:
        gallery = config.gallery.model_copy(update={"view_mode": args.mode})
        config = config.model_copy(update={"gallery": gallery})

    pipeline, view, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    table = read_csv_table(args.rows)
    result = pipeline.run(table, source=str(args.rows))

    logger.info(f"Rows: {args.rows}")
    logger.info(f"Ordered by: {result.key_field or 'original order'}")

    print(f"\n{len(result.records)} gallery items:\n")
    for i, record in enumerate(result.records, 1):
        card = view.card(record)
        line = f"{i}. {card.title}"
        if card.subtitle:
            line += f" ({card.subtitle})"
        print(line)
        print(f"   {card.image_url}")

    frame = view.render(result.records)
    logger.info(f"\nView: {frame.mode} {frame.counter}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Order image gallery rows chronologically.")
    parser.add_argument(
        "rows",
        type=Path,
        help="CSV file with url, title, sub1, sub2 and optional date columns",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ViewMode],
        default=None,
        help="Override the configured view mode",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON record of the preparation stages",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args(argv)
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            rows=ns.rows,
            config=config_path,
            mode=ns.mode,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        run(args)
    except ValueError as e:
        # bad settings file (pydantic.ValidationError is a ValueError)
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
