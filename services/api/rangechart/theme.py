from __future__ import annotations

import string
from dataclasses import dataclass, fields


class InvalidColor(ValueError):
    """Raised when a theme colour is not a 6 or 8 digit hex string."""


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def white(cls, level: float, alpha: float = 1.0) -> "Color":
        return cls(level, level, level, alpha)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        raw = value.strip().lstrip("#")
        if len(raw) not in (6, 8) or any(ch not in string.hexdigits for ch in raw):
            raise InvalidColor(f"Invalid hex color: {value!r}")
        red, green, blue = (int(raw[i : i + 2], 16) for i in range(0, 6, 2))
        alpha = int(raw[6:8], 16) / 255.0 if len(raw) == 8 else 1.0
        return cls.from_rgb255(red, green, blue, alpha)

    def to_hex(self) -> str:
        red, green, blue = (int(round(max(0.0, min(1.0, c)) * 255)) for c in (self.red, self.green, self.blue))
        return f"#{red:02x}{green:02x}{blue:02x}"

    def inverted(self) -> "Color":
        return Color(1.0 - self.red, 1.0 - self.green, 1.0 - self.blue, self.alpha)


@dataclass(frozen=True)
class Theme:
    not_in_range: Color
    raise_: Color
    call: Color
    fold: Color
    grid: Color
    label: Color

    @classmethod
    def from_hex(cls, colors: dict[str, str], base: "Theme | None" = None) -> "Theme":
        """Build a theme from hex strings, taking missing entries from ``base``."""
        base = base or DEFAULT_THEME
        values = {}
        for item in fields(cls):
            raw = colors.get(item.name) or colors.get(item.name.rstrip("_"))
            values[item.name] = Color.from_hex(raw) if raw else getattr(base, item.name)
        return cls(**values)

    def to_hex(self) -> dict[str, str]:
        return {item.name.rstrip("_"): getattr(self, item.name).to_hex() for item in fields(self)}


DEFAULT_THEME = Theme(
    not_in_range=Color.white(0.1),
    raise_=Color.from_rgb255(227, 92, 41),
    call=Color.from_rgb255(67, 155, 29),
    fold=Color.from_rgb255(67, 155, 223),
    grid=Color.white(0.95),
    label=Color.white(0.95),
)
