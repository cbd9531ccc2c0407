"""Han/fu scoring, basic points, and the distribution of points after a win."""

from dataclasses import dataclass, field

from riichikit.handutils import RIICHI_POT  # noqa: F401  (re-exported for callers)

NUM_PLAYERS = 4
_HONBA_POINTS = 100

# Indexed as [not pinfu-style][tsumo][closed].
_BASE_FU = (
    # (open ron, closed ron), (open tsumo, closed tsumo)
    ((30, 30), (30, 20)),  # pinfu-style (no extra fu)
    ((20, 30), (22, 22)),  # not pinfu-style
)


@dataclass(frozen=True)
class DoraHits:
    """Number of dora, ura-dora and red-five hits in a winning hand."""

    dora: int = 0
    ura_dora: int = 0
    aka_dora: int = 0

    def total(self) -> int:
        """Total han contributed by all kinds of dora."""
        return self.dora + self.ura_dora + self.aka_dora


@dataclass(frozen=True)
class Scoring:
    """Value of a win: yakuman count, yaku han, dora hits and fu."""

    yakuman_total_value: int = 0
    yaku_total_value: int = 0
    dora_hits: DoraHits = field(default_factory=DoraHits)
    fu: int = 0

    def han(self) -> int:
        """Han from yaku plus han from dora."""
        return self.yaku_total_value + self.dora_hits.total()

    def basic_points(self) -> int:
        """Basic points under the usual limits (mangan and above)."""
        if self.yakuman_total_value > 0:
            return 8000 * self.yakuman_total_value
        han = self.han()
        if han <= 0:
            return 0
        if han <= 5:
            return min(2000, fu_han_formula(self.fu, han))
        if han <= 7:
            return 3000
        if han <= 10:
            return 4000
        if han <= 12:
            return 6000
        return 8000

    def basic_points_aotenjou(self) -> int:
        """Basic points without any limit; each yakuman counts as 13 han."""
        return fu_han_formula(self.fu, self.yakuman_total_value * 13 + self.han())


@dataclass(frozen=True, order=True)
class RoundId:
    """Identifies a round: the kyoku (dealer rotation) and the honba count."""

    kyoku: int = 0
    honba: int = 0

    def button(self) -> int:
        """The dealer of this round."""
        return self.kyoku % NUM_PLAYERS

    def next_honba(self, renchan: bool) -> "RoundId":
        """The next round after a draw or a dealer win; the honba count goes up."""
        if renchan:
            return RoundId(self.kyoku, self.honba + 1)
        return RoundId(self.kyoku + 1, self.honba + 1)

    def next_kyoku(self) -> "RoundId":
        """The next round after a non-dealer win; honba resets."""
        return RoundId(self.kyoku + 1, 0)


def fu_han_formula(fu: int, han: int) -> int:
    """Basic points before limits: ``fu * 2 ** (2 + han)``."""
    return fu * (1 << (2 + han))


def round_fu_up(fu: int) -> int:
    """Round fu up to the next multiple of 10."""
    return -(-fu // 10) * 10


def round_points_up(points: int) -> int:
    """Round points up to the next multiple of 100."""
    return -(-points // 100) * 100


def calc_regular_fu(is_tsumo: bool, is_closed: bool, extra_fu: int) -> int:
    """Total fu of a regular-form win, given the extra fu from groups, wait and pair."""
    base = _BASE_FU[1 if extra_fu else 0][1 if is_tsumo else 0][1 if is_closed else 0]
    return round_fu_up(extra_fu + base)


def _other_players_after(player: int) -> list[int]:
    return [(player + i) % NUM_PLAYERS for i in range(1, NUM_PLAYERS)]


def distribute_points(
    round_id: RoundId,
    take_pot: bool,
    winner: int,
    contributor: int,
    basic_points: int,
) -> list[int]:
    """Points gained and lost by each player for one win.

    A win by self-draw (``winner == contributor``) is paid by all others:
    the dealer gets 2x from each; a non-dealer gets 1x from each non-dealer
    and 2x from the dealer, with 100 per honba per payer.
    A win on a discard is paid by the contributor alone: 6x to the dealer,
    4x to a non-dealer, plus 300 per honba.
    Each payment is rounded up to the nearest 100 separately.
    """
    button = round_id.button()
    honba = round_id.honba if take_pot else 0

    delta = [0] * NUM_PLAYERS
    if winner == contributor:
        k_non_button, k_button = (2, 0) if winner == button else (1, 2)
        for player in _other_players_after(winner):
            k = k_button if player == button else k_non_button
            points = round_points_up(k * basic_points + _HONBA_POINTS * honba)
            delta[winner] += points
            delta[player] -= points
    else:
        k = 6 if winner == button else 4
        points = round_points_up(k * basic_points + 3 * _HONBA_POINTS * honba)
        delta[winner] += points
        delta[contributor] -= points
    return delta