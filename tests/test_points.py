import pytest

from riichikit.points import (
    DoraHits,
    RoundId,
    Scoring,
    calc_regular_fu,
    distribute_points,
    fu_han_formula,
    round_fu_up,
    round_points_up,
)

BASIC = fu_han_formula(30, 4)


def test_fu_han_formula_example():
    assert BASIC == 1920


@pytest.mark.parametrize(
    "round_id, winner, contributor, expected",
    [
        (RoundId(0, 0), 1, 1, [-3900, 7900, -2000, -2000]),
        (RoundId(0, 2), 1, 1, [-4100, 8500, -2200, -2200]),
        (RoundId(0, 0), 1, 2, [0, 7700, -7700, 0]),
        (RoundId(0, 1), 1, 2, [0, 8000, -8000, 0]),
        (RoundId(0, 0), 1, 0, [-7700, 7700, 0, 0]),
        (RoundId(2, 0), 2, 2, [-3900, -3900, 11700, -3900]),
        (RoundId(2, 0), 2, 3, [0, 0, 11600, -11600]),
    ],
)
def test_distribute_points_examples(round_id, winner, contributor, expected):
    assert distribute_points(round_id, True, winner, contributor, BASIC) == expected


def test_distribute_points_without_pot_ignores_honba():
    assert distribute_points(RoundId(0, 2), False, 1, 2, BASIC) == distribute_points(
        RoundId(0, 0), True, 1, 2, BASIC
    )


def test_distribute_points_sums_to_zero():
    for winner in range(4):
        for contributor in range(4):
            delta = distribute_points(RoundId(1, 3), True, winner, contributor, 1000)
            assert sum(delta) == 0


def test_rounding():
    assert round_points_up(7680) == 7700
    assert round_points_up(7700) == 7700
    assert round_fu_up(22) == 30
    assert round_fu_up(20) == 20


@pytest.mark.parametrize(
    "is_tsumo, is_closed, extra_fu, expected",
    [
        (False, False, 0, 30),
        (False, True, 0, 30),
        (True, False, 0, 30),
        (True, True, 0, 20),
        (False, False, 2, 30),
        (False, True, 2, 40),
        (True, True, 2, 30),
    ],
)
def test_calc_regular_fu(is_tsumo, is_closed, extra_fu, expected):
    assert calc_regular_fu(is_tsumo, is_closed, extra_fu) == expected


def test_scoring_han_includes_dora():
    scoring = Scoring(yaku_total_value=2, dora_hits=DoraHits(1, 1, 1), fu=30)
    assert scoring.han() == 5
    assert DoraHits(1, 2, 3).total() == 6


def test_basic_points_under_mangan():
    assert Scoring(yaku_total_value=4, fu=30).basic_points() == 1920


def test_basic_points_limits():
    assert Scoring(yaku_total_value=5, fu=30).basic_points() == 2000
    assert Scoring(yaku_total_value=6, fu=30).basic_points() == 3000
    assert Scoring(yaku_total_value=8, fu=30).basic_points() == 4000
    assert Scoring(yaku_total_value=11, fu=30).basic_points() == 6000
    assert Scoring(yaku_total_value=13, fu=30).basic_points() == 8000
    assert Scoring(yakuman_total_value=2).basic_points() == 16000
    assert Scoring().basic_points() == 0


def test_basic_points_aotenjou():
    assert Scoring(yaku_total_value=4, fu=30).basic_points_aotenjou() == 1920
    assert (
        Scoring(yaku_total_value=8, fu=30).basic_points_aotenjou()
        > Scoring(yaku_total_value=8, fu=30).basic_points()
    )


def test_round_id():
    assert RoundId(5, 2).button() == 1
    assert RoundId(3, 2).next_honba(True) == RoundId(3, 3)
    assert RoundId(3, 2).next_honba(False) == RoundId(4, 3)
    assert RoundId(3, 2).next_kyoku() == RoundId(4, 0)