"""Conversion between tile encodings and the numeric tile codes used in Tenhou logs.

A tile is an integer encoding in ``0..=36``:

- ``0..=8``: 1m..9m
- ``9..=17``: 1p..9p
- ``18..=26``: 1s..9s
- ``27..=33``: 1z..7z (east, south, west, north, white, green, red)
- ``34..=36``: red 5m, red 5p, red 5s

Tenhou writes a tile as ``10 * (suit + 1) + num``, with red fives as ``51..=53``.
"""

NUM_TILE_KINDS = 37
_NUM_NORMAL = 34
_RED_BASE_CODE = 51

_SUIT_BASES = {1: 0, 2: 9, 3: 18, 4: 27}
_SUIT_SIZES = {1: 9, 2: 9, 3: 9, 4: 7}


def parse_tenhou_tile(code: int) -> int:
    """Return the tile encoding for a Tenhou tile code.

    Raises ValueError if the code does not name a tile.
    """
    if _RED_BASE_CODE <= code <= _RED_BASE_CODE + 2:
        return _NUM_NORMAL + (code - _RED_BASE_CODE)
    tens, num = divmod(code, 10)
    size = _SUIT_SIZES.get(tens)
    if size is None or not 1 <= num <= size:
        raise ValueError(f"not a Tenhou tile code: {code!r}")
    return _SUIT_BASES[tens] + num - 1


def to_tenhou_tile(tile: int) -> int:
    """Return the Tenhou tile code for a tile encoding."""
    if not 0 <= tile < NUM_TILE_KINDS:
        raise ValueError(f"not a tile encoding: {tile!r}")
    if tile >= _NUM_NORMAL:
        return tile - _NUM_NORMAL + _RED_BASE_CODE
    suit, index = divmod(tile, 9)
    return (suit + 1) * 10 + index + 1