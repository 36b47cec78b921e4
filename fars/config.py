"""
FARS toolkit configuration: paths, file pattern, column names, sentinels.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with FARS_DATA_DIR / FARS_BASEMAP env vars
# ---------------------------------------------------------------------------
DATA_DIR = Path(os.environ.get("FARS_DATA_DIR", "."))

# Optional polygon file (shapefile, GeoJSON, ...) used as the map outline.
# When unset, the GeoDa "natregimes" US county polygons from geodatasets are
# dissolved into state outlines (contiguous 48 states and DC).
BASEMAP_PATH = os.environ.get("FARS_BASEMAP") or None
BASEMAP_DATASET = "geoda.natregimes"
# first column found in the county data is used to group counties into states
BASEMAP_STATE_COLUMNS = ["STATE_NAME", "STATE_FIPS", "STFIPS"]

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------
FILENAME_PATTERN = "accident_%d.csv.bz2"

# ---------------------------------------------------------------------------
# Column names as they appear in the FARS accident files
# ---------------------------------------------------------------------------
STATE_COL = "STATE"
MONTH_COL = "MONTH"
LATITUDE_COL = "LATITUDE"
LONGITUDE_COL = "LONGITUD"

# Injected by the year reader; not present in the source files.
YEAR_COL = "year"

# ---------------------------------------------------------------------------
# Coordinate sentinels
# FARS codes "not recorded" coordinates with out-of-range values
# (e.g. 77.7777, 88.8888, 99.9999 for latitude, 777.7777 ... 999.9999 for
# longitude). Anything above these limits is treated as missing.
# ---------------------------------------------------------------------------
LONGITUDE_MISSING_ABOVE = 900
LATITUDE_MISSING_ABOVE = 90
