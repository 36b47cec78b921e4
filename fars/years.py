"""
Year reader (one or more years -> MONTH/year tables)
====================================================

Reads each requested year file and keeps only what the summary needs:
the MONTH column plus a `year` column injected from the requested year
(the files themselves carry no year column).

A bad year never stops the others. Each year produces a `YearResult`;
failures become results with `data=None` and a warning, so the output list
always lines up one-to-one with the input years.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Union
import warnings

import pandas as pd

from .config import MONTH_COL, YEAR_COL
from .loader import PathLike, load, path_for
from .models import FarsError, ParseError, YearResult


def _month_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    if MONTH_COL not in df.columns:
        raise ParseError(f"missing {MONTH_COL} column")
    out = df[[MONTH_COL]].copy()
    out[YEAR_COL] = year
    return out


def read_year(year, data_dir: Optional[PathLike] = None) -> YearResult:
    """Read one year; failures are returned as a result, not raised."""
    try:
        df = load(path_for(year, data_dir))
        data = _month_year(df, year)
    except FarsError as e:
        warnings.warn(f"invalid year: {year}", UserWarning, stacklevel=2)
        return YearResult(year=year, data=None, error=str(e))
    return YearResult(year=year, data=data)


def read_year_results(years: Union[int, Iterable[int]],
                      data_dir: Optional[PathLike] = None) -> List[YearResult]:
    """Read each year in order and return one YearResult per year."""
    if isinstance(years, int):
        years = [years]
    return [read_year(y, data_dir) for y in years]


def read_years(years: Union[int, Iterable[int]],
               data_dir: Optional[PathLike] = None) -> List[Optional[pd.DataFrame]]:
    """
    Read one or more years of FARS data.

    Returns a list with one slot per requested year, in the same order:
    a DataFrame of (MONTH, year) rows, or None when that year's file is
    missing or unreadable.
    """
    return [r.data for r in read_year_results(years, data_dir)]
