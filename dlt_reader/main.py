import sys
import time
import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import List, Optional

from dlt_reader.decoders.dlt_file_reader import DltFileReader
from dlt_reader.decoders.errors import DecodeError
from dlt_reader.exporters.dlt_exporter import DltExporter
from dlt_reader.exporters.text_formatter import get_formatter
from dlt_reader.types.enums import LogLevel
from dlt_reader.utils.dlt_filter import DltFilter

# ============================================================
# CONFIGURATION
# ============================================================
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_INPUT = BASE_DIR / "data" / "data.dlt"
DEFAULT_OUTPUT_DIR = BASE_DIR / "data" / "output"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="dlt-reader",
        description="Decode DLT trace-log storage files.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=str(DEFAULT_INPUT),
        help=f"DLT file to decode (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--mode",
        choices=["raw", "log", "csv"],
        default="log",
        help="raw header dump, one log line per message, or CSV export (default: log)",
    )
    parser.add_argument(
        "--min-level",
        choices=[lvl.name for lvl in LogLevel if lvl != LogLevel.RESERVED],
        help="Only keep log messages at least this severe",
    )
    parser.add_argument(
        "--app-id",
        action="append",
        help="Only keep messages of this application id (repeatable)",
    )
    parser.add_argument(
        "--context-id",
        action="append",
        help="Only keep messages of this context id (repeatable)",
    )
    parser.add_argument(
        "--output",
        help="CSV path for --mode csv (default: data/output/<input>.csv)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    return parser


def print_records(reader: DltFileReader, mode: str, min_level: Optional[LogLevel],
                  app_ids: Optional[List[str]], context_ids: Optional[List[str]]) -> int:
    formatter = get_formatter(mode)
    shown = 0

    for record in reader.read_records():
        if not DltFilter.matches(record, min_level, app_ids, context_ids):
            continue
        if mode == "raw":
            print()
        print(formatter(record))
        shown += 1

    return shown


def export_csv(reader: DltFileReader, output_csv: Path, min_level: Optional[LogLevel],
               app_ids: Optional[List[str]], context_ids: Optional[List[str]]) -> None:
    print(f"\n{'=' * 60}")
    print("DLT Decoder & CSV Export")
    print(f"{'=' * 60}")
    print(f"Input file: {reader.file_path}")
    print(f"{'=' * 60}\n")

    start_time = time.perf_counter()
    df = DltExporter.records_to_dataframe(reader.read_records())
    elapsed_time = time.perf_counter() - start_time
    print(f"   ✅ Decoded {len(df):,} records in {elapsed_time:.4f}s")

    if min_level is not None:
        df = DltFilter.filter_by_min_level(df, min_level)
    if app_ids:
        df = DltFilter.filter_by_application_ids(df, app_ids)
    if context_ids:
        df = DltFilter.filter_by_context_ids(df, context_ids)

    output_csv.parent.mkdir(parents=True, exist_ok=True)
    DltExporter.export_to_csv(df, str(output_csv))

    print(f"\n{'=' * 60}")
    print("📈 Dataset Statistics")
    print(f"{'=' * 60}")
    for key, value in DltFilter.get_statistics(df).items():
        if isinstance(value, float):
            print(f"  {key:25s}: {value:.2f}")
        else:
            print(f"  {key:25s}: {value}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
    logging.getLogger("dlt_reader").setLevel(level)

    reader = DltFileReader(args.file)
    min_level = LogLevel[args.min_level] if args.min_level else None

    try:
        if args.mode == "csv":
            output_csv = Path(args.output) if args.output else DEFAULT_OUTPUT_DIR / f"{Path(args.file).stem}.csv"
            export_csv(reader, output_csv, min_level, args.app_id, args.context_id)
        else:
            print_records(reader, args.mode, min_level, args.app_id, args.context_id)
    except DecodeError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except OSError as err:
        # Raised for the input file as well as the CSV output, err names the path
        print(f"Error: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
