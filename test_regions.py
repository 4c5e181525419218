"""Tests for region records (built-in list + GeoJSON properties)."""

import pytest

from errors import GeoDataError
from regions import US_REGIONS, is_valid_region_code, region_names, regions_from_geojson


def feature(state, name):
    return {
        "type": "Feature",
        "properties": {"state": state, "name": name},
        "geometry": {"type": "Polygon", "coordinates": []},
    }


def test_builtin_list():
    codes = [r["code"] for r in US_REGIONS]
    assert len(codes) == 51
    assert len(set(codes)) == 51
    assert region_names(US_REGIONS)["DC"] == "District of Columbia"


class TestFromGeojson:
    def test_reads_code_and_name_only(self):
        data = {
            "type": "FeatureCollection",
            "features": [feature("TX", "Texas"), feature("CA", "California")],
        }
        assert regions_from_geojson(data) == [
            {"code": "TX", "name": "Texas"},
            {"code": "CA", "name": "California"},
        ]

    def test_skips_features_without_code_and_duplicates(self):
        data = {
            "type": "FeatureCollection",
            "features": [
                feature(None, "Nowhere"),
                feature("TX", "Texas"),
                feature("TX", "Texas again"),
                {"type": "Feature", "properties": None},
            ],
        }
        assert regions_from_geojson(data) == [{"code": "TX", "name": "Texas"}]

    def test_name_falls_back_to_code(self):
        data = {"type": "FeatureCollection", "features": [feature("PR", None)]}
        assert regions_from_geojson(data) == [{"code": "PR", "name": "PR"}]

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "Feature"},
            [],
            {"type": "FeatureCollection", "features": []},
            {"type": "FeatureCollection", "features": [feature("", "Blank")]},
        ],
    )
    def test_unusable(self, data):
        with pytest.raises(GeoDataError):
            regions_from_geojson(data)


@pytest.mark.parametrize("code", ["TX", "DC", "PRI"])
def test_valid_region_codes(code):
    assert is_valid_region_code(code)


@pytest.mark.parametrize("code", ["", "T", "tx", "TEXA", "T1", "TX\n", "<b>", None, 12])
def test_invalid_region_codes(code):
    assert not is_valid_region_code(code)


def test_builtin_codes_are_valid():
    assert all(is_valid_region_code(r["code"]) for r in US_REGIONS)
