"""Riichi mahjong scoring helpers and Tenhou JSON log result and rule interop."""

__version__ = "0.1.0"

__all__ = [
    "tiles",
    "handutils",
    "points",
    "strings",
    "game_end",
    "tenhou_scoring",
    "rule",
    "end_info",
]