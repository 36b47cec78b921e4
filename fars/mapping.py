"""
State maps (accident locations for one state and year)
=======================================================

`map_state` loads a year file, keeps the rows for one state, and plots each
accident as a small dot on top of an outline map.

FARS stores "not recorded" coordinates as out-of-range codes, so those are
turned into NaN first (`sanitize_coordinates`). The map extent is the
bounding box of the remaining coordinates.

Plotting dependencies (matplotlib, geopandas, geodatasets) are imported
lazily, so loading and summarizing work without them.
"""

from __future__ import annotations
from typing import Optional, Tuple
import math

import numpy as np
import pandas as pd

from .config import (
    BASEMAP_DATASET, BASEMAP_PATH, BASEMAP_STATE_COLUMNS, LATITUDE_COL,
    LATITUDE_MISSING_ABOVE, LONGITUDE_COL, LONGITUDE_MISSING_ABOVE, STATE_COL,
)
from .loader import PathLike, load, path_for
from .models import InvalidState

Range = Tuple[float, float]


def _pyplot():
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install it with: python -m pip install matplotlib"
        ) from e
    return plt


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with sentinel LONGITUD (> 900) and LATITUDE (> 90) set to NaN."""
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUDE_COL], errors="coerce")
    lat = pd.to_numeric(out[LATITUDE_COL], errors="coerce")
    out[LONGITUDE_COL] = lon.mask(lon > LONGITUDE_MISSING_ABOVE)
    out[LATITUDE_COL] = lat.mask(lat > LATITUDE_MISSING_ABOVE)
    return out


def bounding_box(df: pd.DataFrame) -> Tuple[Range, Range]:
    """Return ((lon_min, lon_max), (lat_min, lat_max)), ignoring NaN.

    If a column has no usable values its range is (nan, nan).
    """
    def _range(s: pd.Series) -> Range:
        vals = s.dropna()
        if vals.empty:
            return (math.nan, math.nan)
        return (float(vals.min()), float(vals.max()))

    return _range(df[LONGITUDE_COL]), _range(df[LATITUDE_COL])


def _state_outlines(counties):
    """Dissolve county polygons into one outline per state."""
    for col in BASEMAP_STATE_COLUMNS:
        if col in counties.columns:
            return counties[[col, "geometry"]].dissolve(by=col).reset_index()
    return counties


def load_basemap(source: Optional[PathLike] = None):
    """
    Load outline polygons for the map background as a GeoDataFrame.

    `source` (or FARS_BASEMAP) may point at any file geopandas can read,
    e.g. a US states shapefile; it is used as is. Without one, US county
    polygons from geodatasets are dissolved into state outlines
    (downloaded and cached on first use).
    """
    try:
        import geopandas as gpd
    except ImportError as e:
        raise ImportError(
            "Missing dependency: geopandas.\n"
            "Install it with: python -m pip install geopandas"
        ) from e

    source = source or BASEMAP_PATH
    if source is not None:
        return gpd.read_file(source)

    try:
        import geodatasets
    except ImportError as e:
        raise ImportError(
            "Missing dependency: geodatasets.\n"
            "Install it with: python -m pip install geodatasets"
        ) from e
    return _state_outlines(gpd.read_file(geodatasets.get_path(BASEMAP_DATASET)))


def plot_accidents(df: pd.DataFrame, ax=None, basemap=None):
    """
    Plot accident locations over an outline map.

    Returns the matplotlib Axes, or None when there is nothing to plot.
    If every coordinate is missing the extent cannot be computed and
    matplotlib's ValueError for NaN axis limits propagates.
    """
    if len(df) == 0:
        print("no accidents to plot")
        return None

    plt = _pyplot()
    data = sanitize_coordinates(df)
    (lon_min, lon_max), (lat_min, lat_max) = bounding_box(data)

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))
    if basemap is None:
        basemap = load_basemap()

    basemap.plot(ax=ax, color="white", edgecolor="black", linewidth=0.5)
    ax.set_xlim(lon_min, lon_max)
    ax.set_ylim(lat_min, lat_max)
    ax.scatter(data[LONGITUDE_COL].to_numpy(dtype=float),
               data[LATITUDE_COL].to_numpy(dtype=float),
               s=1, marker=".", color="black")
    return ax


def map_state(state_num, year, data_dir: Optional[PathLike] = None, *,
              ax=None, basemap=None, show: bool = True) -> None:
    """
    Display a map of fatal accidents for one state in one year.

    Args:
        state_num: state number as used in the FARS STATE column
            (US Census state codes, e.g. 26 for Michigan).
        year: year of the data file to read.
        data_dir: directory holding the year files (default FARS_DATA_DIR).
        ax: optional matplotlib Axes to draw on.
        basemap: optional GeoDataFrame to use as the outline map.
        show: call `plt.show()` after drawing.

    Raises:
        FileNotFound / ParseError: from loading the year file.
        InvalidState: `state_num` does not occur in that year's data.
    """
    data = load(path_for(year, data_dir))
    state_num = int(state_num)

    states = pd.unique(data[STATE_COL])
    if not np.isin(state_num, states):
        raise InvalidState(f"invalid STATE number: {state_num}")

    sub = data[data[STATE_COL] == state_num]
    drawn = plot_accidents(sub, ax=ax, basemap=basemap)
    if drawn is not None and show:
        _pyplot().show()
