# SPDX-License-Identifier: MIT
"""
Console color configuration for Robber.

Styles are plain ANSI SGR sequences. A ``ColorConfig`` is resolved once at
startup from the default table plus optional ``"<color> [bold]"`` overrides
and is read-only afterwards, so it can be shared between scan workers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from robber.core.levels import Level

log = logging.getLogger(__name__)

RESET = "\033[0m"
BOLD = 1


@dataclass(frozen=True)
class Style:
    """An ANSI display style: a foreground color plus optional attributes."""

    codes: Tuple[int, ...]

    def bold(self) -> "Style":
        """Return this style with bold emphasis added."""
        if BOLD in self.codes:
            return self
        return Style(self.codes + (BOLD,))

    @property
    def is_bold(self) -> bool:
        return BOLD in self.codes

    def paint(self, text: str) -> str:
        """Wrap text in this style's escape sequence."""
        if not text:
            return text
        sgr = ";".join(str(code) for code in self.codes)
        return f"\033[{sgr}m{text}{RESET}"


# Supported color names: 8 base colors and their bright "hi" variants
PALETTE: Mapping[str, Style] = MappingProxyType({
    "black": Style((30,)),
    "red": Style((31,)),
    "green": Style((32,)),
    "yellow": Style((33,)),
    "blue": Style((34,)),
    "magenta": Style((35,)),
    "cyan": Style((36,)),
    "white": Style((37,)),
    "hiBlack": Style((90,)),
    "hiRed": Style((91,)),
    "hiGreen": Style((92,)),
    "hiYellow": Style((93,)),
    "hiBlue": Style((94,)),
    "hiMagenta": Style((95,)),
    "hiCyan": Style((96,)),
    "hiWhite": Style((97,)),
})

DEFAULT_STYLES: Mapping[Level, Style] = MappingProxyType({
    Level.VERBOSE: PALETTE["blue"],
    Level.SECRET: PALETTE["hiYellow"].bold(),
    Level.INFO: PALETTE["hiWhite"],
    Level.DATA: PALETTE["hiBlue"],
    Level.SUCC: PALETTE["green"],
    Level.WARN: PALETTE["red"],
    Level.FAIL: PALETTE["red"].bold(),
})


def parse_style(value: str) -> Optional[Style]:
    """
    Parse a ``"<colorName> [bold]"`` string.

    Returns None when the string is empty or names a color outside the palette.
    Any second token other than ``bold`` is ignored.
    """
    if not isinstance(value, str):
        return None
    fields = value.split()
    if not fields:
        return None
    style = PALETTE.get(fields[0])
    if style is None:
        return None
    if len(fields) > 1 and fields[1] == "bold":
        return style.bold()
    return style


@dataclass(frozen=True)
class ColorConfig:
    """Immutable mapping from every severity level to its display style."""

    styles: Mapping[Level, Style]

    @classmethod
    def default(cls) -> "ColorConfig":
        return cls(MappingProxyType(dict(DEFAULT_STYLES)))

    @classmethod
    def resolve(cls, overrides: Optional[Mapping] = None) -> "ColorConfig":
        """
        Build a complete configuration from the defaults and optional overrides.

        Args:
            overrides: Mapping of level (name or ``Level``) to ``"<color> [bold]"``

        Returns:
            ColorConfig covering all levels. Unknown levels, unknown colors and
            empty values leave the default for that level in place.
        """
        styles: Dict[Level, Style] = dict(DEFAULT_STYLES)
        for key, value in (overrides or {}).items():
            level = Level.from_name(key)
            if level is None:
                log.debug("Ignoring color override for unknown level %r", key)
                continue
            style = parse_style(value)
            if style is None:
                if value:
                    log.debug("Ignoring unsupported color %r for level %s", value, level.value)
                continue
            styles[level] = style
        return cls(MappingProxyType(styles))

    def style_for(self, level: Level) -> Style:
        return self.styles[level]

    def paint(self, level: Level, text: str) -> str:
        return self.styles[level].paint(text)
