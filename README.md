# riichikit

Helpers for riichi mahjong scoring, and for reading and writing the
end-of-round result entry and the rule object of Tenhou's JSON game logs.

The package has no dependencies beyond the standard library.

## Installation

```
pip install riichikit
```

## Modules

- `riichikit.tiles` — convert between tile encodings (0–36: 1m–9m, 1p–9p,
  1s–9s, 1z–7z, then red 5m/5p/5s) and Tenhou's tile codes
  (`parse_tenhou_tile`, `to_tenhou_tile`). Unknown codes raise `ValueError`.
- `riichikit.handutils` — counting helpers over a hand given as 37 tile counts
  (`terminal_kinds`, `terminal_count`, `pure_terminal_kinds`,
  `pure_terminal_count`, `honor_kinds`, `honor_count`, `green_count`,
  `m_count`, `p_count`, `s_count`, `z_count`), nine-gates shape checks
  (`chuuren_agari` on a packed suit, `chuuren_wait` on nine counts), and
  end-of-round deltas: `calc_wall_exhausted_delta` (3000-point no-wait
  penalty) and `calc_pot_delta` (1000 from each player under riichi).
- `riichikit.points` — `DoraHits`, `Scoring` (with `han()`,
  `basic_points()` and the unlimited `basic_points_aotenjou()`), `RoundId`
  (with `button()`, `next_honba(renchan)`, `next_kyoku()`), and the
  arithmetic `fu_han_formula`, `round_fu_up`, `round_points_up`,
  `calc_regular_fu` and `distribute_points` for self-draw and discard wins.
- `riichikit.strings` — the `Yaku`, `AbortReason` and `AgariKind` enums and
  their Tenhou strings: `yaku_from_str`, `yaku_to_str`, `abort_from_str`,
  `abort_to_str`, `result_to_str`.
- `riichikit.game_end` — `GameLimits` (soft and hard round limits and the
  points needed to finish in sudden death) and `next_round_id_or_game_end`,
  which returns the next `RoundId` or `None` when the game is over.
- `riichikit.tenhou_scoring` — `TenhouScoring` (a `ScoringTier`, han, fu and
  a `Ron`, `TsumoByButton` or `TsumoByNonButton` payout) and `YakuOrDora`
  (kind given by `YakuOrDoraKind`), parsed from and formatted to strings such
  as `"30符3飜3900点"` or `"立直(1飜)"`.
- `riichikit.rule` — `TenhouRule`, the `rule` object of a log, with
  `from_json`, `to_json`, `num_reds`, `allows_red`, `allows_kuitan` and
  `num_kyokus`.
- `riichikit.end_info` — `TenhouEndInfo` and `TenhouAgariResult`, the
  result array that closes every round in a log, with `from_json` and
  `to_json`.

Players are numbered 0–3 throughout.

## Example

```python
from riichikit.points import RoundId, distribute_points, fu_han_formula
from riichikit.tenhou_scoring import TenhouScoring
from riichikit.end_info import TenhouEndInfo

basic = fu_han_formula(30, 4)                 # 1920
delta = distribute_points(RoundId(kyoku=0, honba=0), True, 1, 1, basic)
# [-3900, 7900, -2000, -2000]

scoring = TenhouScoring.parse("満貫2000-4000点")
print(str(scoring))                            # 満貫2000-4000点

info = TenhouEndInfo.from_json(["流し満貫", [-4000, -4000, 12000, -4000]])
print(info.to_json())                          # ['流し満貫', [-4000, -4000, 12000, -4000]]
```

Malformed input raises an exception (`ValueError`, or `EndInfoError`, a
subclass of it, for result arrays) rather than falling back to a default.

## What it does not do

- It does not run a game: there is no round state, no checking of actions or
  calls, no hand decomposition and no yaku detection.
- It does not read or write a whole Tenhou log. Only the rule object and the
  end-of-round result entry are handled; the per-player draw, discard and
  meld lists of a round are not decoded, and no round is replayed.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```