"""
Data model (YearResult) and errors
==================================

FARS tables themselves stay as pandas DataFrames; this module holds the
small types that travel between the loader, the year reader and the CLI.

`YearResult` is the per-year outcome of reading a file: either a table of
(MONTH, year) rows or an absence marker with the reason. Keeping it
immutable (`frozen=True`) means a result list can be handed around without
anyone swapping a year's data behind the caller's back.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import pandas as pd


class FarsError(Exception):
    """Base class for errors raised by the FARS toolkit."""


class FileNotFound(FarsError, FileNotFoundError):
    """A year file does not exist at the requested path."""


class ParseError(FarsError, ValueError):
    """A year file exists but cannot be read as a FARS table."""


class InvalidState(FarsError, ValueError):
    """A state number does not occur in the loaded year's data."""


@dataclass(frozen=True)
class YearResult:
    """Outcome of reading one year file."""
    year: int
    data: Optional[pd.DataFrame] = None
    # reason the year was dropped; None when data is present
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None
