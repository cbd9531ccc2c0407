"""Counting helpers over hands and small end-of-round point calculations.

A hand is a sequence of 37 tile counts indexed by tile encoding
(34 normal kinds followed by the three red fives).
"""

from collections.abc import Sequence
from typing import Optional

RIICHI_POT = 1000
_NO_WAIT_PENALTY_TOTAL = 3000

_PURE_TERMINALS = (0, 8, 9, 17, 18, 26)
_HONORS = range(27, 34)
_GREENS = (19, 20, 21, 23, 25, 32)
_RED_M, _RED_P, _RED_S = 34, 35, 36

_CHUUREN_TARGET = (3, 1, 1, 1, 1, 1, 1, 1, 3)


def terminal_kinds(hand: Sequence[int]) -> int:
    """Number of distinct terminal and honor kinds present."""
    return pure_terminal_kinds(hand) + honor_kinds(hand)


def terminal_count(hand: Sequence[int]) -> int:
    """Number of terminal and honor tiles."""
    return pure_terminal_count(hand) + honor_count(hand)


def pure_terminal_kinds(hand: Sequence[int]) -> int:
    """Number of distinct 1/9 kinds present."""
    return sum(1 for i in _PURE_TERMINALS if hand[i] > 0)


def pure_terminal_count(hand: Sequence[int]) -> int:
    """Number of 1/9 tiles."""
    return sum(hand[i] for i in _PURE_TERMINALS)


def honor_kinds(hand: Sequence[int]) -> int:
    """Number of distinct honor kinds present."""
    return sum(1 for i in _HONORS if hand[i] > 0)


def honor_count(hand: Sequence[int]) -> int:
    """Number of honor tiles."""
    return sum(hand[i] for i in _HONORS)


def green_count(hand: Sequence[int]) -> int:
    """Number of tiles that are entirely green (23468s and green dragon)."""
    return sum(hand[i] for i in _GREENS)


def m_count(hand: Sequence[int]) -> int:
    """Number of characters tiles, red five included."""
    return sum(hand[0:9]) + hand[_RED_M]


def p_count(hand: Sequence[int]) -> int:
    """Number of dots tiles, red five included."""
    return sum(hand[9:18]) + hand[_RED_P]


def s_count(hand: Sequence[int]) -> int:
    """Number of bamboo tiles, red five included."""
    return sum(hand[18:27]) + hand[_RED_S]


def z_count(hand: Sequence[int]) -> int:
    """Alias of :func:`honor_count`."""
    return honor_count(hand)


def chuuren_agari(packed: int) -> Optional[int]:
    """Check a packed suit (three bits per kind, 1 lowest) of 3N+2 tiles for the
    nine-gates form ``311111113`` plus one.

    Returns the position (0..=8) of the extra tile, or None.
    """
    if (packed + 0o133333331) & 0o444444444 != 0o444444444:
        return None
    rest = packed - 0o311111113
    if rest <= 0 or rest & (rest - 1):
        return None
    return ((rest & -rest).bit_length() - 1) // 3


def chuuren_wait(suit: Sequence[int]) -> Optional[tuple[int, int]]:
    """Check whether nine counts of one suit are one tile away from ``311111113``.

    Returns ``(lacking, over)`` positions, ``(0, 0)`` for the exact form, or None.
    """
    if len(suit) != len(_CHUUREN_TARGET):
        raise ValueError(f"expected 9 counts, got {len(suit)}")
    lack: Optional[int] = None
    over: Optional[int] = None
    for i, (count, target) in enumerate(zip(suit, _CHUUREN_TARGET)):
        diff = count - target
        if diff == -1:
            if lack is not None:
                return None
            lack = i
        elif diff == 1:
            if over is not None:
                return None
            over = i
        elif diff != 0:
            return None
    if lack is None and over is None:
        return (0, 0)
    if lack is not None and over is not None:
        return (lack, over)
    return None


def calc_wall_exhausted_delta(waiting: Sequence[int]) -> list[int]:
    """Points delta for each player at an exhaustive draw without nagashi mangan.

    ``waiting`` holds 1 for each player who is waiting and 0 otherwise.
    """
    no_wait = _NO_WAIT_PENALTY_TOTAL
    num_waiting = sum(waiting)
    down, up = {
        1: (-no_wait // 3, no_wait),
        2: (-no_wait // 2, no_wait // 2),
        3: (-no_wait, no_wait // 3),
    }.get(num_waiting, (0, 0))
    return [up if w > 0 else down for w in waiting]


def calc_pot_delta(riichi: Sequence[object]) -> list[int]:
    """Each player with an active riichi (not None) pays into the pot."""
    return [-RIICHI_POT if r is not None else 0 for r in riichi]