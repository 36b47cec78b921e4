import math

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from fars import FileNotFound, InvalidState, map_state
from fars.mapping import bounding_box, load_basemap, plot_accidents, sanitize_coordinates


def test_sanitize_coordinates():
    df = pd.DataFrame({
        "LATITUDE": [42.0, 90.0, 90.5, 99.9999],
        "LONGITUD": [-83.0, 900.0, 900.1, 999.9999],
    })
    out = sanitize_coordinates(df)
    assert out["LATITUDE"].isna().tolist() == [False, False, True, True]
    assert out["LONGITUD"].isna().tolist() == [False, False, True, True]
    # input untouched
    assert df["LATITUDE"].iloc[3] == 99.9999


def test_bounding_box_ignores_missing():
    df = sanitize_coordinates(pd.DataFrame({
        "LATITUDE": [42.3, 99.9999, 44.0],
        "LONGITUD": [-83.0, 999.9999, -85.5],
    }))
    assert bounding_box(df) == ((-85.5, -83.0), (42.3, 44.0))


def test_bounding_box_all_missing():
    df = sanitize_coordinates(pd.DataFrame({"LATITUDE": [99.9999], "LONGITUD": [999.9999]}))
    (lon_min, lon_max), (lat_min, lat_max) = bounding_box(df)
    assert all(math.isnan(v) for v in (lon_min, lon_max, lat_min, lat_max))


def test_map_state_invalid_state(data_dir, basemap):
    with pytest.raises(InvalidState, match="invalid STATE number: 3"):
        map_state(3, 2015, data_dir, basemap=basemap, show=False)


def test_map_state_missing_year(data_dir, basemap):
    with pytest.raises(FileNotFound):
        map_state(26, 9999, data_dir, basemap=basemap, show=False)


def test_map_state_draws_points_in_bounding_box(data_dir, basemap):
    fig, ax = plt.subplots()
    assert map_state("26", 2015, data_dir, ax=ax, basemap=basemap, show=False) is None

    assert ax.get_xlim() == pytest.approx((-85.5, -83.0))
    assert ax.get_ylim() == pytest.approx((42.3, 44.0))
    # the row with sentinel coordinates is not drawn
    offsets = np.ma.filled(np.ma.asarray(ax.collections[-1].get_offsets(), dtype=float), np.nan)
    assert np.isfinite(offsets).all(axis=1).sum() == 2


def test_map_state_shows_figure(data_dir, basemap, monkeypatch):
    calls = []
    monkeypatch.setattr(plt, "show", lambda *a, **k: calls.append(1))
    map_state(1, 2015, data_dir, basemap=basemap)
    assert calls == [1]


def test_all_coordinates_missing_is_left_to_matplotlib(data_dir, basemap):
    with pytest.raises(ValueError):
        map_state(48, 2015, data_dir, basemap=basemap, show=False)


def test_plot_accidents_empty(capsys, basemap):
    empty = pd.DataFrame(columns=["STATE", "MONTH", "LATITUDE", "LONGITUD"])
    assert plot_accidents(empty, basemap=basemap) is None
    assert "no accidents to plot" in capsys.readouterr().out


@pytest.fixture
def county_file(tmp_path):
    import geopandas as gpd
    from shapely.geometry import box

    counties = gpd.GeoDataFrame(
        {"NAME": ["Wayne", "Oakland", "Cook"],
         "STATE_NAME": ["Michigan", "Michigan", "Illinois"]},
        geometry=[box(-84, 42, -83, 42.5), box(-84, 42.5, -83, 43), box(-88, 41, -87, 42)],
    )
    path = tmp_path / "counties.geojson"
    counties.to_file(path, driver="GeoJSON")
    return path


def test_default_basemap_is_state_outlines(county_file, monkeypatch):
    import geodatasets

    requested = []
    monkeypatch.setattr(geodatasets, "get_path", lambda name: requested.append(name) or str(county_file))
    outlines = load_basemap()
    assert requested == ["geoda.natregimes"]
    assert sorted(outlines["STATE_NAME"]) == ["Illinois", "Michigan"]
    michigan = outlines[outlines["STATE_NAME"] == "Michigan"].geometry.iloc[0]
    assert michigan.bounds == pytest.approx((-84, 42, -83, 43))


def test_explicit_basemap_is_used_as_is(county_file):
    assert len(load_basemap(county_file)) == 3
