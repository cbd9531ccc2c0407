"""Tenhou's written notation for the value of a win and its yaku/dora breakdown.

Examples of the notation:

- ``30符3飜3900点``: 30 fu, 3 han, 3900 points paid on a discard.
- ``50符3飜3200点∀``: dealer self-draw, 3200 points from each player.
- ``満貫2000-4000点``: mangan self-draw, 2000 from non-dealers, 4000 from the dealer.
- ``対々和(2飜)``, ``四槓子(役満)``, ``ドラ(2飜)``: one yaku or dora entry.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from riichikit.strings import (
    AKA_DORA_STR,
    DORA_STR,
    URA_DORA_STR,
    Yaku,
    yaku_from_str,
    yaku_to_str,
)

_U8_MAX = 255
_I8_MIN, _I8_MAX = -128, 127


class ScoringTier(Enum):
    """The named value of a win; ``HanFu`` means it is written as fu and han."""

    HanFu = ""
    Mangan = "満貫"
    Haneman = "跳満"
    Baiman = "倍満"
    Sanbaiman = "三倍満"
    Yakuman = "役満"


@dataclass(frozen=True)
class Ron:
    """Win on a discard: the contributor pays ``points``."""

    points: int

    def __str__(self) -> str:
        return f"{self.points}点"


@dataclass(frozen=True)
class TsumoByButton:
    """Self-draw by the dealer: each other player pays ``points``."""

    points: int

    def __str__(self) -> str:
        return f"{self.points}点∀"


@dataclass(frozen=True)
class TsumoByNonButton:
    """Self-draw by a non-dealer: non-dealers and the dealer pay different amounts."""

    non_button: int
    button: int

    def __str__(self) -> str:
        return f"{self.non_button}-{self.button}点"


Payout = Union[Ron, TsumoByButton, TsumoByNonButton]


@dataclass(frozen=True)
class TenhouScoring:
    """Points of a win and how they are paid, in Tenhou's notation."""

    payout: Payout
    tier: ScoringTier = ScoringTier.HanFu
    han: int = 0
    fu: int = 0

    def __str__(self) -> str:
        if self.tier is ScoringTier.HanFu:
            head = f"{self.fu}符{self.han}飜"
        else:
            head = self.tier.value
        return f"{head}{self.payout}"

    @classmethod
    def parse(cls, text: str) -> "TenhouScoring":
        """Parse the notation; raises ValueError if it is not valid."""
        return parse_tenhou_scoring(text)


_RE_SCORING = re.compile(
    r"(?:(\d+)符(\d+)飜|(満貫|跳満|倍満|三倍満|役満))"
    r"(?:(\d+)点|(\d+)点∀|(\d+)-(\d+)点)"
)

_TIERS_BY_NAME = {
    tier.value: tier for tier in ScoringTier if tier is not ScoringTier.HanFu
}


def _small_uint(digits: str, text: str) -> int:
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"value out of range in Tenhou scoring: {text!r}")
    return value


def parse_tenhou_scoring(text: str) -> TenhouScoring:
    """Parse a Tenhou scoring string such as ``30符3飜3900点``.

    Raises ValueError if the string is not in that notation.
    """
    match = _RE_SCORING.fullmatch(text)
    if match is None:
        raise ValueError(f"not a Tenhou scoring string: {text!r}")
    fu_str, han_str, tier_str, ron, by_button, non_button, button = match.groups()

    if fu_str is not None and han_str is not None:
        tier = ScoringTier.HanFu
        fu = _small_uint(fu_str, text)
        han = _small_uint(han_str, text)
    else:
        tier = _TIERS_BY_NAME[tier_str]
        fu = han = 0

    payout: Payout
    if ron is not None:
        payout = Ron(int(ron))
    elif by_button is not None:
        payout = TsumoByButton(int(by_button))
    else:
        payout = TsumoByNonButton(non_button=int(non_button), button=int(button))

    return TenhouScoring(payout=payout, tier=tier, han=han, fu=fu)


class YakuOrDoraKind(Enum):
    """What a yaku-or-dora entry counts."""

    Yaku = "yaku"
    Yakuman = "yakuman"
    Dora = "dora"
    AkaDora = "aka_dora"
    UraDora = "ura_dora"


_DORA_KINDS = {
    DORA_STR: YakuOrDoraKind.Dora,
    AKA_DORA_STR: YakuOrDoraKind.AkaDora,
    URA_DORA_STR: YakuOrDoraKind.UraDora,
}
_DORA_NAMES = {kind: name for name, kind in _DORA_KINDS.items()}


@dataclass(frozen=True)
class YakuOrDora:
    """One entry of a win's breakdown: a yaku with han, a yakuman, or a dora count."""

    kind: YakuOrDoraKind
    han: int = 0
    yaku: Optional[Yaku] = None

    def __post_init__(self) -> None:
        needs_yaku = self.kind in (YakuOrDoraKind.Yaku, YakuOrDoraKind.Yakuman)
        if needs_yaku and self.yaku is None:
            raise ValueError(f"{self.kind.name} entry needs a yaku")
        if not needs_yaku and self.yaku is not None:
            raise ValueError(f"{self.kind.name} entry cannot name a yaku")

    def __str__(self) -> str:
        if self.kind is YakuOrDoraKind.Yakuman:
            return f"{yaku_to_str(self.yaku)}(役満)"
        if self.kind is YakuOrDoraKind.Yaku:
            return f"{yaku_to_str(self.yaku)}({self.han}飜)"
        return f"{_DORA_NAMES[self.kind]}({self.han}飜)"

    @classmethod
    def parse(cls, text: str) -> "YakuOrDora":
        """Parse one breakdown entry; raises ValueError if it is not valid."""
        return parse_yaku_or_dora(text)


_RE_YAKU = re.compile(r"([^()]+)\((?:(\d+)飜|役満)\)")


def parse_yaku_or_dora(text: str) -> YakuOrDora:
    """Parse an entry such as ``対々和(2飜)``, ``四槓子(役満)`` or ``ドラ(2飜)``.

    Raises ValueError if the string is not such an entry.
    """
    match = _RE_YAKU.match(text)
    if match is None:
        raise ValueError(f"not a Tenhou yaku/dora string: {text!r}")
    name, han_str = match.groups()
    han: Optional[int] = None
    if han_str is not None:
        value = int(han_str)
        if _I8_MIN <= value <= _I8_MAX:
            han = value

    dora_kind = _DORA_KINDS.get(name)
    if dora_kind is not None:
        if han is None:
            raise ValueError(f"dora entry without han: {text!r}")
        return YakuOrDora(dora_kind, han=han)

    yaku = yaku_from_str(name)
    if han is None:
        return YakuOrDora(YakuOrDoraKind.Yakuman, yaku=yaku)
    return YakuOrDora(YakuOrDoraKind.Yaku, han=han, yaku=yaku)