"""Deciding whether the game continues into the next round or ends."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from riichikit.points import NUM_PLAYERS, RoundId


@dataclass(frozen=True)
class GameLimits:
    """Limits on game length and the points needed to finish.

    - ``kyoku_max_soft``: last regular round; past it, the game goes on only
      while nobody has reached ``points_min_qualify`` (sudden death).
    - ``kyoku_max_hard``: the game never goes past this round.
    - ``points_min_qualify``: points needed to end the game in sudden death.
    """

    kyoku_max_soft: int = 7
    kyoku_max_hard: int = 11
    points_min_qualify: int = 30000

    def __post_init__(self) -> None:
        if self.kyoku_max_soft > self.kyoku_max_hard:
            raise ValueError(
                f"soft limit {self.kyoku_max_soft} exceeds hard limit {self.kyoku_max_hard}"
            )


def _other_players_after(player: int) -> list[int]:
    return [(player + i) % NUM_PLAYERS for i in range(1, NUM_PLAYERS)]


def next_round_id_or_game_end(
    limits: GameLimits,
    points: Sequence[int],
    button: int,
    renchan: bool,
    next_round_id: RoundId,
) -> Optional[RoundId]:
    """Return the next round, or None if the game ends before it.

    ``points`` are the players' points after the round that just ended,
    ``button`` is that round's dealer and ``renchan`` tells whether the dealer keeps the seat.
    """
    if len(points) != NUM_PLAYERS:
        raise ValueError(f"expected {NUM_PLAYERS} points entries, got {len(points)}")

    if next_round_id.kyoku > limits.kyoku_max_hard:
        return None
    if next_round_id.kyoku > limits.kyoku_max_soft:
        if all(p < limits.points_min_qualify for p in points):
            return next_round_id
        return None
    if (
        next_round_id.kyoku == limits.kyoku_max_soft
        and renchan
        and all(points[p] < points[button] for p in _other_players_after(button))
    ):
        return None
    return next_round_id