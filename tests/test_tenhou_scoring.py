import pytest

from riichikit.strings import Yaku
from riichikit.tenhou_scoring import (
    Ron,
    ScoringTier,
    TenhouScoring,
    TsumoByButton,
    TsumoByNonButton,
    YakuOrDora,
    YakuOrDoraKind,
    parse_tenhou_scoring,
    parse_yaku_or_dora,
)

SCORING_EXAMPLES = [
    ("30符3飜3900点", TenhouScoring(payout=Ron(3900), han=3, fu=30)),
    ("50符3飜3200点∀", TenhouScoring(payout=TsumoByButton(3200), han=3, fu=50)),
    (
        "満貫2000-4000点",
        TenhouScoring(
            payout=TsumoByNonButton(non_button=2000, button=4000),
            tier=ScoringTier.Mangan,
        ),
    ),
]


@pytest.mark.parametrize("text,scoring", SCORING_EXAMPLES)
def test_scoring_examples(text, scoring):
    assert str(scoring) == text
    assert TenhouScoring.parse(text) == scoring
    assert parse_tenhou_scoring(text) == scoring


@pytest.mark.parametrize(
    "text",
    ["跳満12000点", "30符2飜2000点", "役満16000-32000点", "30符1飜300-500点", "三倍満12000点∀"],
)
def test_scoring_round_trip(text):
    assert str(parse_tenhou_scoring(text)) == text


def test_scoring_haneman_ron():
    scoring = parse_tenhou_scoring("跳満12000点")
    assert scoring.tier is ScoringTier.Haneman
    assert scoring.payout == Ron(12000)


@pytest.mark.parametrize(
    "text",
    ["", "30符3900点", "満貫", "倍満x点", "30符3飜3900点extra", "300符3飜3900点", "超満8000点"],
)
def test_scoring_invalid(text):
    with pytest.raises(ValueError):
        parse_tenhou_scoring(text)


YAKU_EXAMPLES = [
    ("対々和(2飜)", YakuOrDora(YakuOrDoraKind.Yaku, han=2, yaku=Yaku.Toitoihou)),
    ("四槓子(役満)", YakuOrDora(YakuOrDoraKind.Yakuman, yaku=Yaku.Suukantsu)),
    ("ドラ(2飜)", YakuOrDora(YakuOrDoraKind.Dora, han=2)),
    ("裏ドラ(1飜)", YakuOrDora(YakuOrDoraKind.UraDora, han=1)),
    ("赤ドラ(3飜)", YakuOrDora(YakuOrDoraKind.AkaDora, han=3)),
]


@pytest.mark.parametrize("text,entry", YAKU_EXAMPLES)
def test_yaku_examples(text, entry):
    assert str(entry) == text
    assert YakuOrDora.parse(text) == entry
    assert parse_yaku_or_dora(text) == entry


def test_yaku_with_space_in_name():
    entry = parse_yaku_or_dora("役牌 發(1飜)")
    assert entry == YakuOrDora(YakuOrDoraKind.Yaku, han=1, yaku=Yaku.SangenpaiHatsu)


@pytest.mark.parametrize("text", ["ドラ(役満)", "未知の役(1飜)", "立直", "(1飜)"])
def test_yaku_invalid(text):
    with pytest.raises(ValueError):
        parse_yaku_or_dora(text)


def test_yaku_entry_needs_yaku():
    with pytest.raises(ValueError):
        YakuOrDora(YakuOrDoraKind.Yaku, han=1)


def test_dora_entry_rejects_yaku():
    with pytest.raises(ValueError):
        YakuOrDora(YakuOrDoraKind.Dora, han=1, yaku=Yaku.Riichi)