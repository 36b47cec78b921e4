import matplotlib
matplotlib.use("Agg")

import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd
import pytest
from shapely.geometry import box


# STATE, MONTH, LATITUDE, LONGITUD, FATALS
ROWS_2015 = [
    (1, 1, 32.5, -86.5, 1),
    (1, 1, 33.0, -87.0, 1),
    (1, 3, 31.0, -85.0, 2),
    (26, 1, 42.3, -83.0, 1),
    (26, 2, 99.9999, 999.9999, 1),
    (26, 12, 44.0, -85.5, 1),
    (6, 7, 36.0, -120.0, 1),
    (48, 4, 99.9999, 999.9999, 1),
]

ROWS_2014 = [
    (26, 2, 42.0, -84.0, 1),
    (26, 2, 42.5, -84.5, 1),
    (26, 5, 43.0, -83.5, 3),
]

COLUMNS = ["STATE", "MONTH", "LATITUDE", "LONGITUD", "FATALS"]


@pytest.fixture
def data_dir(tmp_path):
    """Directory with good 2014/2015 files, a corrupt 2013 and a 2012 without MONTH."""
    pd.DataFrame(ROWS_2015, columns=COLUMNS).to_csv(tmp_path / "accident_2015.csv.bz2", index=False)
    pd.DataFrame(ROWS_2014, columns=COLUMNS).to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    (tmp_path / "accident_2013.csv.bz2").write_bytes(b"this is not bzip2 data")
    pd.DataFrame({"STATE": [1], "DAY": [3]}).to_csv(tmp_path / "accident_2012.csv.bz2", index=False)
    return tmp_path


@pytest.fixture
def basemap():
    return gpd.GeoDataFrame(geometry=[box(-90, 30, -80, 46), box(-125, 32, -114, 42)])


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
