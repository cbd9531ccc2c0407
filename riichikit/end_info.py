"""The end-of-round entry of a Tenhou JSON round: the result and points changes.

In the log it is a JSON array:

- a win: ``["和了", delta, details, delta, details, ...]`` with one
  ``delta``/``details`` pair per winner;
- an exhaustive draw or nagashi mangan: ``["流局", delta]``;
- any other abort: ``["四家立直"]``.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from riichikit.points import NUM_PLAYERS
from riichikit.strings import (
    AGARI_STR,
    ALL_WAITING,
    NONE_WAITING,
    AbortReason,
    AgariKind,
    abort_from_str,
    result_to_str,
)
from riichikit.tenhou_scoring import TenhouScoring, YakuOrDora, parse_yaku_or_dora

RoundResult = Union[AbortReason, AgariKind]

_ABORTS_WITH_DELTA = (AbortReason.WallExhausted, AbortReason.NagashiMangan)


class EndInfoError(ValueError):
    """Raised when an end-of-round entry cannot be decoded."""


def _as_int(value: Any) -> int:
    """An integer JSON value, or 0 for anything else."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def _delta_from(values: Sequence[Any]) -> list[int]:
    return [_as_int(v) for v in values]


@dataclass
class TenhouAgariResult:
    """One winner's share of a win as written in the log."""

    winner: int
    contributor: int
    liable_player: int
    points_delta_after_pot: list[int]
    scoring: TenhouScoring
    details: list[YakuOrDora] = field(default_factory=list)

    def to_json(self) -> list[Any]:
        """Return the details array: players, scoring string, then yaku/dora strings."""
        return [
            self.winner,
            self.contributor,
            self.liable_player,
            str(self.scoring),
            *(str(entry) for entry in self.details),
        ]

    @classmethod
    def _from_json(cls, delta: Sequence[Any], details: Sequence[Any]) -> "TenhouAgariResult":
        points = _delta_from(delta) if len(delta) == NUM_PLAYERS else [0] * NUM_PLAYERS
        scoring_str = details[3]
        if not isinstance(scoring_str, str):
            raise EndInfoError("invalid score")
        try:
            scoring = TenhouScoring.parse(scoring_str)
        except ValueError as exc:
            raise EndInfoError("invalid score") from exc
        entries = []
        for value in details[4:]:
            if not isinstance(value, str):
                continue
            try:
                entries.append(parse_yaku_or_dora(value))
            except ValueError:
                continue
        return cls(
            winner=_as_int(details[0]),
            contributor=_as_int(details[1]),
            liable_player=_as_int(details[2]),
            points_delta_after_pot=points,
            scoring=scoring,
            details=entries,
        )


@dataclass
class TenhouEndInfo:
    """How a round ended, the total points change, and each winner's result."""

    result: RoundResult
    overall_delta: list[int] = field(default_factory=lambda: [0] * NUM_PLAYERS)
    agari: list[TenhouAgariResult] = field(default_factory=list)

    def to_json(self) -> list[Any]:
        """Return the JSON array of this entry."""
        head = result_to_str(self.result)
        if isinstance(self.result, AgariKind):
            out: list[Any] = [head]
            for agari in self.agari:
                out.append(list(agari.points_delta_after_pot))
                out.append(agari.to_json())
            return out
        if self.result in _ABORTS_WITH_DELTA:
            return [head, list(self.overall_delta)]
        return [head]

    @classmethod
    def from_json(cls, data: Sequence[Any]) -> "TenhouEndInfo":
        """Decode the JSON array; raises EndInfoError if it is malformed."""
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise EndInfoError("end info must be an array")
        items = iter(data)
        result_str = next(items, None)
        if not isinstance(result_str, str):
            raise EndInfoError("no result str")

        if result_str != AGARI_STR:
            try:
                reason = abort_from_str(result_str)
            except ValueError as exc:
                raise EndInfoError("unrecognized result") from exc
            if reason not in _ABORTS_WITH_DELTA:
                return cls(result=reason)
            delta = next(items, None)
            if isinstance(delta, list) and len(delta) == NUM_PLAYERS:
                return cls(result=reason, overall_delta=_delta_from(delta))
            if result_str in (NONE_WAITING, ALL_WAITING):
                return cls(result=reason)
            raise EndInfoError("invalid delta")

        agari: list[TenhouAgariResult] = []
        while True:
            delta = next(items, None)
            details = next(items, None)
            if not (isinstance(delta, list) and isinstance(details, list)):
                break
            if len(details) >= 4:
                agari.append(TenhouAgariResult._from_json(delta, details))

        if not agari:
            raise EndInfoError("win without any winner")
        first = agari[0]
        kind = AgariKind.Tsumo if first.winner == first.contributor else AgariKind.Ron
        overall = [sum(column) for column in zip(*(a.points_delta_after_pot for a in agari))]
        return cls(result=kind, overall_delta=overall, agari=agari)