"""Yaku and round-result names and their Tenhou string forms."""

from enum import Enum, auto
from typing import Union


class Yaku(Enum):
    """Scoring patterns of a winning hand."""

    Menzenchintsumohou = auto()
    Riichi = auto()
    Ippatsu = auto()
    Chankan = auto()
    Rinshankaihou = auto()
    Haiteimouyue = auto()
    Houteiraoyui = auto()
    Pinfu = auto()
    Tanyaochuu = auto()
    Iipeikou = auto()
    JikazehaiE = auto()
    JikazehaiS = auto()
    JikazehaiW = auto()
    JikazehaiN = auto()
    BakazehaiE = auto()
    BakazehaiS = auto()
    BakazehaiW = auto()
    BakazehaiN = auto()
    SangenpaiHaku = auto()
    SangenpaiHatsu = auto()
    SangenpaiChun = auto()
    DoubleRiichi = auto()
    Chiitoitsu = auto()
    Honchantaiyaochuu = auto()
    Ikkitsuukan = auto()
    Sanshokudoujun = auto()
    Sanshokudoukou = auto()
    Sankantsu = auto()
    Toitoihou = auto()
    Sannankou = auto()
    Shousangen = auto()
    Honroutou = auto()
    Ryanpeikou = auto()
    Junchantaiyaochuu = auto()
    Honniisou = auto()
    Chinniisou = auto()
    Renhou = auto()
    Tenhou = auto()
    Chiihou = auto()
    Daisangen = auto()
    Suuankou = auto()
    SuuankouTanki = auto()
    Tsuuiisou = auto()
    Ryuuiisou = auto()
    Chinroutou = auto()
    Chuurenpoutou = auto()
    Junseichuurenpoutou = auto()
    Kokushi = auto()
    Kokushi13 = auto()
    Daisuushi = auto()
    Shousuushi = auto()
    Suukantsu = auto()


class AbortReason(Enum):
    """Ways a round ends without a win."""

    WallExhausted = auto()
    NagashiMangan = auto()
    NineKinds = auto()
    DoubleRon = auto()
    TripleRon = auto()
    FourWind = auto()
    FourRiichi = auto()
    FourKan = auto()


class AgariKind(Enum):
    """Win by self-draw or on another player's discard."""

    Tsumo = auto()
    Ron = auto()


AGARI_STR = "和了"
ALL_WAITING = "全員聴牌"
NONE_WAITING = "全員不聴"

DORA_STR = "ドラ"
AKA_DORA_STR = "赤ドラ"
URA_DORA_STR = "裏ドラ"

_ABORT_TO_STR = {
    AbortReason.WallExhausted: "流局",
    AbortReason.NagashiMangan: "流し満貫",
    AbortReason.NineKinds: "九種九牌",
    AbortReason.DoubleRon: "",  # not seen in public logs
    AbortReason.TripleRon: "三家和了",
    AbortReason.FourWind: "四風連打",
    AbortReason.FourRiichi: "四家立直",
    AbortReason.FourKan: "四槓散了",
}

_STR_TO_ABORT = {
    text: reason
    for reason, text in _ABORT_TO_STR.items()
    if text
}
_STR_TO_ABORT[NONE_WAITING] = AbortReason.WallExhausted
_STR_TO_ABORT[ALL_WAITING] = AbortReason.WallExhausted

_YAKU_TO_STR = {
    Yaku.Menzenchintsumohou: "門前清自摸和",
    Yaku.Riichi: "立直",
    Yaku.Ippatsu: "一発",
    Yaku.Chankan: "槍槓",
    Yaku.Rinshankaihou: "嶺上開花",
    Yaku.Haiteimouyue: "海底摸月",
    Yaku.Houteiraoyui: "河底撈魚",
    Yaku.Pinfu: "平和",
    Yaku.Tanyaochuu: "断幺九",
    Yaku.Iipeikou: "一盃口",
    Yaku.JikazehaiE: "自風 東",
    Yaku.JikazehaiS: "自風 南",
    Yaku.JikazehaiW: "自風 西",
    Yaku.JikazehaiN: "自風 北",
    Yaku.BakazehaiE: "場風 東",
    Yaku.BakazehaiS: "場風 南",
    Yaku.BakazehaiW: "場風 西",
    Yaku.BakazehaiN: "場風 北",
    Yaku.SangenpaiHaku: "役牌 白",
    Yaku.SangenpaiHatsu: "役牌 發",
    Yaku.SangenpaiChun: "役牌 中",
    Yaku.DoubleRiichi: "両立直",
    Yaku.Chiitoitsu: "七対子",
    Yaku.Honchantaiyaochuu: "混全帯幺九",
    Yaku.Ikkitsuukan: "一気通貫",
    Yaku.Sanshokudoujun: "三色同順",
    Yaku.Sanshokudoukou: "三色同刻",
    Yaku.Sankantsu: "三槓子",
    Yaku.Toitoihou: "対々和",
    Yaku.Sannankou: "三暗刻",
    Yaku.Shousangen: "小三元",
    Yaku.Honroutou: "混老頭",
    Yaku.Ryanpeikou: "二盃口",
    Yaku.Junchantaiyaochuu: "純全帯幺九",
    Yaku.Honniisou: "混一色",
    Yaku.Chinniisou: "清一色",
    Yaku.Tenhou: "天和",
    Yaku.Chiihou: "地和",
    Yaku.Daisangen: "大三元",
    Yaku.Suuankou: "四暗刻",
    Yaku.SuuankouTanki: "四暗刻単騎",
    Yaku.Tsuuiisou: "字一色",
    Yaku.Ryuuiisou: "緑一色",
    Yaku.Chinroutou: "清老頭",
    Yaku.Chuurenpoutou: "九蓮宝燈",
    Yaku.Junseichuurenpoutou: "純正九蓮宝燈",
    Yaku.Kokushi: "国士無双",
    Yaku.Kokushi13: "国士無双１３面",
    Yaku.Daisuushi: "大四喜",
    Yaku.Shousuushi: "小四喜",
    Yaku.Suukantsu: "四槓子",
}

_STR_TO_YAKU = {text: yaku for yaku, text in _YAKU_TO_STR.items()}


def abort_from_str(text: str) -> AbortReason:
    """Return the abort reason named by a Tenhou round result string.

    Raises ValueError if the string names no abort.
    """
    try:
        return _STR_TO_ABORT[text]
    except KeyError:
        raise ValueError(f"not a Tenhou abort string: {text!r}") from None


def abort_to_str(reason: AbortReason) -> str:
    """Return the Tenhou round result string of an abort ("" if it has none)."""
    return _ABORT_TO_STR[reason]


def yaku_from_str(text: str) -> Yaku:
    """Return the yaku named by a Tenhou yaku string.

    Raises ValueError if the string names no yaku.
    """
    try:
        return _STR_TO_YAKU[text]
    except KeyError:
        raise ValueError(f"not a Tenhou yaku string: {text!r}") from None


def yaku_to_str(yaku: Yaku) -> str:
    """Return the Tenhou string of a yaku ("" if Tenhou has no name for it)."""
    return _YAKU_TO_STR.get(yaku, "")


def result_to_str(result: Union[AbortReason, AgariKind, object]) -> str:
    """Return the Tenhou round result string for an abort or a win; "" otherwise."""
    if isinstance(result, AbortReason):
        return abort_to_str(result)
    if isinstance(result, AgariKind):
        return AGARI_STR
    return ""