"""
FARS Command Line Interface (CLI)
=================================

One-shot commands over a directory of FARS year files:

    fars summarize 2013 2014 2015 --data-dir data/
    fars summarize 2015 --out summary.xlsx
    fars years 2013 2014 2015
    fars map 26 2015 --save michigan_2015.png

The CLI never modifies the data files. Summaries can be written to CSV or
Excel (via openpyxl); maps are shown on screen or saved as an image.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import sys
import warnings

from .mapping import load_basemap, map_state
from .models import FarsError
from .summary import count_by_month, pivot_counts
from .years import read_year_results


def build_parser() -> argparse.ArgumentParser:
    # --data-dir is accepted before or after the subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-dir", dest="data_dir", default=argparse.SUPPRESS,
                        help="Directory containing accident_<year>.csv.bz2 files (default: FARS_DATA_DIR or .)")

    ap = argparse.ArgumentParser(prog="fars", description="FARS accident summaries and maps",
                                 parents=[common])
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("summarize", parents=[common], help="Accident counts by month and year")
    p.add_argument("years", nargs="+", type=int)
    p.add_argument("--out", default=None, help="Write the table to .csv or .xlsx")

    p = sub.add_parser("years", parents=[common], help="Row count per year file")
    p.add_argument("years", nargs="+", type=int)

    p = sub.add_parser("map", parents=[common], help="Plot accident locations for one state and year")
    p.add_argument("state", type=int)
    p.add_argument("year", type=int)
    p.add_argument("--basemap", default=None, help="Outline file (shapefile, GeoJSON, ...)")
    p.add_argument("--save", default=None, help="Write the figure to this path instead of showing it")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the `fars` command. Returns the exit status."""
    args = build_parser().parse_args(argv)
    if not hasattr(args, "data_dir"):
        args.data_dir = None
    try:
        handle(args)
    except (FarsError, ValueError) as e:
        # ValueError covers plotting failures such as a state whose
        # coordinates are all unrecorded (no map extent)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def handle(args: argparse.Namespace) -> None:
    """Run one parsed command."""
    if args.command == "summarize":
        with warnings.catch_warnings():
            # the per-year outcome is reported below instead
            warnings.simplefilter("ignore", UserWarning)
            results = read_year_results(args.years, args.data_dir)
        table = pivot_counts(count_by_month(r.data for r in results))
        for r in results:
            if not r.ok:
                print(f"Skipped {r.year}: {r.error}")
        print(table.to_string() if not table.empty else "No data for the requested years.")
        if args.out:
            _write_table(table, args.out)
            print(f"Summary written to {args.out}")
        return

    if args.command == "years":
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            results = read_year_results(args.years, args.data_dir)
        for r in results:
            print(f"{r.year}: {len(r.data):,} rows" if r.ok else f"{r.year}: missing ({r.error})")
        return

    if args.command == "map":
        basemap = load_basemap(args.basemap) if args.basemap else None
        if args.save:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(8, 6))
            try:
                map_state(args.state, args.year, args.data_dir, ax=ax, basemap=basemap, show=False)
                fig.savefig(args.save, dpi=200)
            finally:
                plt.close(fig)
            print(f"Map written to {args.save}")
        else:
            map_state(args.state, args.year, args.data_dir, basemap=basemap)
        return

    raise ValueError(f"Unknown command: {args.command}")


def _write_table(table, out_path: str) -> None:
    if out_path.lower().endswith(".xlsx"):
        table.to_excel(out_path, engine="openpyxl")
    else:
        table.to_csv(out_path)


if __name__ == "__main__":
    sys.exit(main())
