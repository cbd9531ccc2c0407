"""The rule object of a Tenhou JSON game log."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

_U8_MAX = 255

_RED_FIELDS = (
    ("num_reds_0", "aka51"),
    ("num_reds_1", "aka52"),
    ("num_reds_2", "aka53"),
    ("num_reds_each", "aka"),
)


def _optional_count(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U8_MAX:
        raise ValueError(f"invalid value for {key!r}: {value!r}")
    return value


@dataclass
class TenhouRule:
    """The most common and important fields of a Tenhou rule object."""

    raw_rule_str: str = ""
    num_reds_0: Optional[int] = None
    num_reds_1: Optional[int] = None
    num_reds_2: Optional[int] = None
    num_reds_each: Optional[int] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TenhouRule":
        """Build from a decoded JSON object; ``disp`` is required."""
        if not isinstance(data, Mapping):
            raise ValueError(f"rule must be an object, got {type(data).__name__}")
        if "disp" not in data:
            raise ValueError("rule is missing 'disp'")
        disp = data["disp"]
        if not isinstance(disp, str):
            raise ValueError(f"invalid value for 'disp': {disp!r}")
        counts = {attr: _optional_count(data, key) for attr, key in _RED_FIELDS}
        return cls(raw_rule_str=disp, **counts)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object, leaving out fields that are not set."""
        out: dict[str, Any] = {"disp": self.raw_rule_str}
        for attr, key in _RED_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out

    def num_reds(self) -> tuple[int, int, int]:
        """Number of red fives per suit (m, p, s) in the full wall.

        The rule string may still decide whether reds count at all.
        """
        m, p, s = self.num_reds_0, self.num_reds_1, self.num_reds_2
        if m is not None and p is not None and s is not None:
            return (m, p, s)
        if self.num_reds_each is not None:
            each = self.num_reds_each
            return (each, each, each)
        return (0, 0, 0)

    def allows_red(self) -> Optional[bool]:
        """True or False if the rule string says so; None if the string is empty."""
        if not self.raw_rule_str:
            return None
        return "喰" in self.raw_rule_str

    def allows_kuitan(self) -> bool:
        """Whether the all-simples yaku is allowed with an open hand."""
        return "喰" in self.raw_rule_str

    def num_kyokus(self) -> Optional[int]:
        """4 for an East-only game, 8 for East-South, None if the rule string does not say."""
        if "東" in self.raw_rule_str:
            return 4
        if "南" in self.raw_rule_str:
            return 8
        return None