#!/usr/bin/env python3
"""
Write the seeded demo booking history to a CSV or Excel file.
The output can be uploaded through the Data page or the `/files/upload` endpoint to try the full flow.
Run it directly, and expect it to print a JSON summary and exit non-zero on bad arguments.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

import pandas as pd

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.demo.mock_data import DEMO_HISTORY_DAYS, DEMO_SEED, generate_demo_bookings  # noqa: E402
from src.ingestion.uploads import format_file_size, upload_extension  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the seeded demo booking dataset")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/demo/camp_azur_bookings.csv"),
        help="Destination file; the extension selects CSV (.csv) or Excel (.xlsx)",
    )
    parser.add_argument("--days", type=int, default=DEMO_HISTORY_DAYS, help="Days of history before the end date")
    parser.add_argument("--seed", type=int, default=DEMO_SEED, help="Random seed for reproducible rows")
    parser.add_argument(
        "--end-date",
        type=date.fromisoformat,
        default=None,
        help="Last booking date (YYYY-MM-DD); defaults to today in UTC",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    extension = upload_extension(args.output.name)
    if extension == ".xls":
        print("Legacy .xls output is not supported; use .csv or .xlsx", file=sys.stderr)
        return 2
    if args.days < 0:
        print("--days must be >= 0", file=sys.stderr)
        return 2

    frame = pd.DataFrame(generate_demo_bookings(today=args.end_date, days=args.days, seed=args.seed))
    args.output.parent.mkdir(parents=True, exist_ok=True)
    if extension == ".csv":
        frame.to_csv(args.output, index=False)
    else:
        frame.to_excel(args.output, index=False, engine="openpyxl")

    summary = {
        "output": str(args.output),
        "rows": int(len(frame)),
        "first_date": frame["date"].min(),
        "last_date": frame["date"].max(),
        "size": format_file_size(args.output.stat().st_size),
    }
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
