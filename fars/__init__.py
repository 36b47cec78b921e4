"""
FARS package
============

Small toolkit for the NHTSA Fatality Analysis Reporting System (FARS)
yearly accident files (`accident_<year>.csv.bz2`).

- File naming and loading is in `fars/loader.py`.
- Per-year reading (with failure isolation) is in `fars/years.py`.
- Month x year accident counts are in `fars/summary.py`.
- State point maps are in `fars/mapping.py`.
- The CLI entry point is in `fars/cli.py`.
"""

from .models import FarsError, FileNotFound, ParseError, InvalidState, YearResult
from .loader import filename_for, path_for, load
from .years import read_year, read_year_results, read_years
from .summary import count_by_month, pivot_counts, summarize
from .mapping import map_state

__version__ = '0.1.0'
