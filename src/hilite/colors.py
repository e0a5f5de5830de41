# hilite/colors.py
"""
Color definitions for hilite.

This module holds the fixed pattern palette and the conversion of colors
to ANSI SGR escape sequences:
- Color: a named ANSI (0-15) or 256-color index
- ColorSpec: foreground and/or background color for one styled segment
- PALETTE: the ordered colors handed out to patterns by position

Usage:
    from hilite.colors import PALETTE, ColorSpec, color_for_index
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# =============================================================================
# ANSI Color Constants
# =============================================================================

# Mapping of logical color names to ANSI color indices (0-15)
# Standard ANSI: 0-7, Bright: 8-15
ANSI_COLOR_MAP: Dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}

ANSI_RESET = "\033[0m"


@dataclass(frozen=True, slots=True)
class Color:
    """
    A terminal color.

    Indices below 16 use the classic SGR codes (30-37/90-97 foreground,
    40-47/100-107 background) so the terminal theme applies; anything
    else is sent as an extended 256-color index.
    """

    name: str
    index: int

    def __post_init__(self):
        if not 0 <= self.index <= 255:
            raise ValueError(f"Color index out of range: {self.index}")

    def sgr_code(self, background: bool = False) -> str:
        """Return the SGR parameter string selecting this color."""
        if self.index < 8:
            base = 40 if background else 30
            return str(base + self.index)
        if self.index < 16:
            base = 100 if background else 90
            return str(base + (self.index - 8))
        return f"{48 if background else 38};5;{self.index}"


def ansi_color(name: str) -> Color:
    """Build a Color from one of the logical names in ANSI_COLOR_MAP."""
    return Color(name, ANSI_COLOR_MAP[name])


def ansi256_color(name: str, index: int) -> Color:
    """Build a Color from an extended 256-color index."""
    return Color(name, index)


@dataclass(frozen=True, slots=True)
class ColorSpec:
    """Foreground and background of one styled segment."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None

    @classmethod
    def for_color(cls, color: Color, background: bool = False) -> "ColorSpec":
        """Put ``color`` in the background or the foreground slot."""
        if background:
            return cls(bg=color)
        return cls(fg=color)

    def is_none(self) -> bool:
        return self.fg is None and self.bg is None

    def to_ansi(self) -> str:
        """
        Encode the spec as one escape sequence, e.g. "\\033[31m" or
        "\\033[38;5;220;44m". An empty spec encodes to "".
        """
        codes = []
        if self.fg is not None:
            codes.append(self.fg.sgr_code(background=False))
        if self.bg is not None:
            codes.append(self.bg.sgr_code(background=True))
        if not codes:
            return ""
        return f"\033[{';'.join(codes)}m"


# =============================================================================
# Pattern Palette
# =============================================================================

PALETTE: Tuple[Color, ...] = (
    ansi_color("red"),
    ansi_color("yellow"),
    ansi_color("blue"),
    ansi_color("green"),
    ansi_color("magenta"),
    ansi_color("cyan"),
    ansi256_color("light_cyan", 49),
    ansi256_color("light_yellow", 220),
    ansi256_color("light_blue", 51),
    ansi256_color("yellow_green", 106),
    ansi256_color("pink", 207),
    ansi256_color("purple", 165),
)


def color_for_index(index: int) -> Color:
    """Palette color for the pattern at 0-based position ``index``."""
    return PALETTE[index % len(PALETTE)]
