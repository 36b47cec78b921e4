"""
Dataset loader (accident_<year>.csv.bz2 -> DataFrame)
=====================================================

This module turns a year into a FARS filename and reads that file.

Key ideas:
- Filenames follow one fixed pattern, so `filename_for` is pure string work.
- `path_for` joins the filename with the data directory (FARS_DATA_DIR).
- `load` always reads from disk; there is no cache, so two calls on the
  same file give two independent (but equal) tables.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union
import os

import pandas as pd

from .config import DATA_DIR, FILENAME_PATTERN
from .models import FileNotFound, ParseError

PathLike = Union[str, "os.PathLike[str]"]


def filename_for(year) -> str:
    """Return the FARS filename for a year, e.g. 2015 -> accident_2015.csv.bz2."""
    return FILENAME_PATTERN % int(year)


def path_for(year, data_dir: Optional[PathLike] = None) -> Path:
    """Return the full path of a year file inside `data_dir` (default DATA_DIR)."""
    base = Path(data_dir) if data_dir is not None else DATA_DIR
    return base / filename_for(year)


def load(filename: PathLike) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the suffix (.bz2 for the yearly files).
    `low_memory=False` keeps pandas from emitting mixed-dtype warnings while
    it parses, so loading is silent.

    Raises:
        FileNotFound: the path does not exist.
        ParseError: the file cannot be decompressed or parsed as CSV.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFound(f"file '{filename}' does not exist")

    try:
        df = pd.read_csv(path, low_memory=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError,
            UnicodeDecodeError, OSError, EOFError) as e:
        raise ParseError(f"file '{filename}' could not be parsed: {e}") from e
    return df
