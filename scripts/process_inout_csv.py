"""Aggregate an in/out attendance CSV into overtime and no-pay totals.

The CSV needs ``in`` and ``out`` columns (ISO timestamps); ``holiday``,
``description`` and ``no_pay`` are optional.

Usage:
    python scripts/process_inout_csv.py attendance.csv --basic 16000 --divide-by 240
    python scripts/process_inout_csv.py attendance.csv --mode flat
"""

from __future__ import annotations

import argparse
import csv
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, TextIO

from paysheet.calc.aggregator import aggregate
from paysheet.calc.rates import RateConfig, RateMode
from paysheet.core.config import AppSettings
from paysheet.core.exceptions import PaysheetError
from paysheet.core.logging import configure_logging


def read_rows(handle: TextIO) -> list[dict[str, Any]]:
    """Read CSV rows, dropping blank optional cells."""
    rows = []
    for row in csv.DictReader(handle):
        cleaned = {k.strip(): v.strip() for k, v in row.items() if k and v is not None}
        if not cleaned.get("no_pay"):
            cleaned.pop("no_pay", None)
        rows.append(cleaned)
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", type=Path)
    parser.add_argument("--mode", choices=[m.value for m in RateMode], default=None)
    parser.add_argument("--basic", type=Decimal, default=Decimal("0"))
    parser.add_argument("--divide-by", type=Decimal, default=None)
    parser.add_argument("--details", action="store_true", help="include per-interval rows")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings)
    ot = settings.overtime

    rate = RateConfig(
        mode=RateMode(args.mode) if args.mode else ot.rate_mode,
        basic=args.basic,
        divide_by=args.divide_by if args.divide_by is not None else ot.default_divide_by,
        flat_regular=ot.flat_regular_rate,
        flat_double=ot.flat_double_rate,
    )
    with args.csv_path.open(newline="") as handle:
        rows = read_rows(handle)

    try:
        result = aggregate(rows, rate)
    except PaysheetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    exclude = None if args.details else {"intervals"}
    print(result.model_dump_json(indent=2, exclude=exclude))
    return 0


if __name__ == "__main__":
    sys.exit(main())
