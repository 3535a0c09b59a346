import pytest
from src.domain.models.geo import GeoPoint


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=42.3601, lon=-71.0589)
    assert p.lat == 42.3601
    assert p.lon == -71.0589


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lon: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lon=lon)


def test_maybe_returns_none_for_missing_or_invalid_coordinates() -> None:
    assert GeoPoint.maybe(None, -71.0) is None
    assert GeoPoint.maybe(42.0, None) is None
    assert GeoPoint.maybe(123.0, 0.0) is None
    assert GeoPoint.maybe(42.0, -71.0) == GeoPoint(lat=42.0, lon=-71.0)
