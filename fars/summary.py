"""
Summaries (accident counts by month and year)
=============================================

The summary is built in two explicit steps:

1) `count_by_month` -> a sparse map {(year, MONTH): count}
   Only combinations that actually occur get a key.
2) `pivot_counts` -> the wide table: one row per MONTH, one column per year.

Because step 1 never invents keys, a month with no accidents in a given
year shows up as <NA> in the wide table, not as 0.
"""

from __future__ import annotations
from typing import Dict, Iterable, Optional, Tuple, Union

import pandas as pd

from .config import MONTH_COL, YEAR_COL
from .loader import PathLike
from .years import read_years

Counts = Dict[Tuple[int, int], int]


def count_by_month(frames: Iterable[Optional[pd.DataFrame]]) -> Counts:
    """Count rows per (year, MONTH) across the given tables.

    `None` entries (years that failed to load) are skipped.
    """
    counts: Counts = {}
    for df in frames:
        if df is None:
            continue
        sizes = df.groupby([YEAR_COL, MONTH_COL], dropna=False).size()
        for key, n in sizes.items():
            counts[key] = counts.get(key, 0) + int(n)
    return counts


def pivot_counts(counts: Counts) -> pd.DataFrame:
    """Materialize sparse (year, MONTH) counts into the wide summary table.

    Rows are MONTH ascending, columns are years ascending, cells are
    nullable integers. Missing combinations stay <NA>.
    """
    years = sorted({y for y, _ in counts})
    months = sorted({m for _, m in counts})
    table = pd.DataFrame(index=pd.Index(months, name=MONTH_COL),
                         columns=years, dtype="Int64")
    for (y, m), n in counts.items():
        table.at[m, y] = n
    return table


def summarize(years: Union[int, Iterable[int]],
              data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Summarize the number of fatal accidents by month and year.

    Years whose files are missing or unreadable are left out (with a
    warning from the year reader). If no year could be read the result is
    an empty table.
    """
    return pivot_counts(count_by_month(read_years(years, data_dir)))
