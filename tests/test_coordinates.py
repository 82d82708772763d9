import pytest

from mapurl.schemas.common import LatLon
from mapurl.schemas.static_map import PathSpec
from mapurl.utils.coordinates import format_coordinate, format_lat_lon


@pytest.mark.parametrize(
    "value,expected",
    [
        (40.0, "40"),
        (-75.0, "-75"),
        (12.3, "12.3"),
        (1.2345, "1.2345"),
        (40.712345, "40.71235"),
        (51.000001, "51.00001"),
        (0.0, "0"),
    ],
)
def test_format_coordinate(value, expected):
    assert format_coordinate(value) == expected


def test_rounds_toward_positive_infinity():
    # Ceiling, not half-even: both directions move up
    assert format_coordinate(10.000001) == "10.00001"
    assert format_coordinate(-73.987654) == "-73.98765"
    assert format_coordinate(2.000005) == "2.00001"


def test_exact_values_are_not_rounded():
    assert format_coordinate(40.7128) == "40.7128"
    assert format_coordinate(-74.00597) == "-74.00597"


def test_integer_part_has_no_minimum_digits():
    assert format_coordinate(0.5) == ".5"
    assert format_coordinate(-0.25) == "-.25"


def test_negative_values_rounding_to_zero_keep_sign():
    assert format_coordinate(-0.000001) == "-0"


@pytest.mark.parametrize("value", [40.712345, -73.987654, 0.5, -0.000001, 179.99999, 3.0])
def test_formatting_is_idempotent(value):
    once = format_coordinate(value)
    assert format_coordinate(float(once)) == once


def test_format_lat_lon():
    assert format_lat_lon(51.5, -0.12) == "51.5,-.12"
    assert format_lat_lon(40.0, -75.0) == "40,-75"


@pytest.mark.parametrize("lat,lon", [(float("nan"), 1.0), (1.0, float("inf")), (float("-inf"), 1.0)])
def test_non_finite_coordinates_are_rejected(lat, lon):
    with pytest.raises(ValueError):
        LatLon(lat=lat, lon=lon)


def test_non_finite_opacity_is_rejected():
    with pytest.raises(ValueError):
        PathSpec(stroke_opacity=float("nan"))
