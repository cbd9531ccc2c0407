import pytest

from riichikit.tiles import parse_tenhou_tile, to_tenhou_tile

TENHOU_CODES = [
    11, 12, 13, 14, 15, 16, 17, 18, 19,
    21, 22, 23, 24, 25, 26, 27, 28, 29,
    31, 32, 33, 34, 35, 36, 37, 38, 39,
    41, 42, 43, 44, 45, 46, 47,
    51, 52, 53,
]


def test_tenhou_tiles_round_trip():
    for encoding, code in enumerate(TENHOU_CODES):
        assert parse_tenhou_tile(code) == encoding
        assert to_tenhou_tile(encoding) == code


@pytest.mark.parametrize("code, encoding", [(11, 0), (19, 8), (25, 13), (47, 33), (51, 34), (53, 36)])
def test_tenhou_tile_pinned(code, encoding):
    assert parse_tenhou_tile(code) == encoding


@pytest.mark.parametrize("code", [0, 10, 20, 30, 40, 48, 49, 50, 54, 60, 100])
def test_invalid_codes_rejected(code):
    with pytest.raises(ValueError):
        parse_tenhou_tile(code)


@pytest.mark.parametrize("tile", [-1, 37, 100])
def test_invalid_encodings_rejected(tile):
    with pytest.raises(ValueError):
        to_tenhou_tile(tile)