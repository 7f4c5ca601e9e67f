from __future__ import annotations

import pytest

from route_model.core.models import Coordinate
from route_model.core.polyline import MalformedPolyline, decode, encode


def _pairs(coords):
    return [c.as_lat_lng() for c in coords]


def test_decode_empty_and_none():
    assert decode("") == ()
    assert decode(None) == ()


def test_decode_reference_sample(sample_points):
    got = _pairs(decode(sample_points))
    expected = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
    assert len(got) == len(expected)
    for (lat, lng), (elat, elng) in zip(got, expected):
        assert lat == pytest.approx(elat, abs=1e-5)
        assert lng == pytest.approx(elng, abs=1e-5)


def test_decode_is_repeatable(sample_points):
    assert decode(sample_points) == decode(sample_points)


def test_zero_pair_decodes_to_origin():
    assert decode("??") == (Coordinate(latitude=0.0, longitude=0.0),)


def test_encode_reproduces_reference_sample(sample_points):
    assert encode(decode(sample_points)) == sample_points


def test_decode_encode_decode_is_stable(sample_points):
    first = decode(sample_points)
    assert decode(encode(first)) == first


def test_encode_empty():
    assert encode([]) == ""


def test_precision_six():
    coords = [Coordinate(latitude=1.234567, longitude=-2.345678), Coordinate(latitude=1.3, longitude=-2.4)]
    got = decode(encode(coords, precision=6), precision=6)
    flat = [v for pair in _pairs(got) for v in pair]
    expected = [v for pair in _pairs(coords) for v in pair]
    assert flat == pytest.approx(expected, abs=1e-6)


def test_truncated_mid_value_fails(sample_points):
    truncated = [
        sample_points[:i]
        for i in range(1, len(sample_points))
        if (ord(sample_points[i - 1]) - 63) & 0x20
    ]
    assert truncated
    for s in truncated:
        with pytest.raises(MalformedPolyline):
            decode(s)


def test_latitude_without_longitude_fails():
    with pytest.raises(MalformedPolyline) as exc_info:
        decode("_p~iF")
    assert exc_info.value.position == 5
    assert exc_info.value.encoded == "_p~iF"


@pytest.mark.parametrize("bad", ["_p~iF ps|U", "??\x7f?", "é?"])
def test_character_outside_alphabet_fails(bad):
    with pytest.raises(MalformedPolyline):
        decode(bad)


def test_malformed_is_a_value_error():
    with pytest.raises(ValueError):
        decode("_")


def test_out_of_range_values_are_not_clamped():
    coords = [Coordinate(latitude=95.0, longitude=200.0)]
    got = decode(encode(coords))
    assert got[0].latitude == pytest.approx(95.0)
    assert got[0].longitude == pytest.approx(200.0)
    assert not got[0].is_in_range


@pytest.mark.parametrize(
    "coords",
    [
        [(-0.00001, -0.00001), (-12.34567, -98.76543), (-12.34566, -98.76544)],
        [(89.99999, 179.99999), (-89.99999, -179.99999), (0.0, 0.0)],
        [(51.5, -0.12), (51.5, -0.12), (51.50001, -0.11999)],
        [(0.0, 0.0)],
    ],
)
def test_stable_round_trip_for_varied_paths(coords):
    encoded = encode([Coordinate(latitude=lat, longitude=lng) for lat, lng in coords])
    once = decode(encoded)
    assert decode(encode(once)) == once
    flat = [v for pair in _pairs(once) for v in pair]
    assert flat == pytest.approx([v for pair in coords for v in pair], abs=1e-5)


@pytest.mark.parametrize("encoded", ["_p~iF~ps|U_ulLnnqC_mqNvxq`@", "~~~~~~?~~~~~~?", "_cidP~bidP??"])
def test_stable_round_trip_at_precision_six(encoded):
    once = decode(encoded, precision=6)
    assert decode(encode(once, precision=6), precision=6) == once
