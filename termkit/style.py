"""
ANSI styling.

Two call shapes produce the same escape sequences:

* ``style()`` takes raw SGR numbers (weight, color, background) and emits a
  single ``ESC[w;c;bgm`` sequence. This is what the console helpers use.
* ``colorize()`` takes color names from a fixed table, validates them, and
  only wraps the parts of the text that are not already styled.

Both build a ``StyleRequest``, which is just the SGR parameter groups to emit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from termkit.errors import InvalidStyleError


# ------------------------------------------------------------------------------
# SGR CODES
# ------------------------------------------------------------------------------

ESC = "\033"
RESET = "\033[0m"

# Weight / decoration
BOLD = 1
DIM = 2
ITALIC = 3
UNDERLINE = 4
FLASH = 5

# Foreground colors (add 10 for the background variant)
BLACK = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
PURPLE = 35
CYAN = 36
WHITE = 37
GRAY = 47
DARKGRAY = 100

FOREGROUND_COLORS: dict[str, str] = {
    "black": "0;30",
    "dark_gray": "1;30",
    "blue": "0;34",
    "light_blue": "1;34",
    "green": "0;32",
    "light_green": "1;32",
    "cyan": "0;36",
    "light_cyan": "1;36",
    "red": "0;31",
    "light_red": "1;31",
    "purple": "0;35",
    "light_purple": "1;35",
    "brown": "0;33",
    "yellow": "1;33",
    "light_gray": "0;37",
    "white": "1;37",
}

BACKGROUND_COLORS: dict[str, str] = {
    "black": "40",
    "red": "41",
    "green": "42",
    "yellow": "43",
    "blue": "44",
    "magenta": "45",
    "cyan": "46",
    "light_gray": "47",
}

# A complete styled span: opening sequence through the first reset.
_SPAN_RE = re.compile(r"(\033\[.+?\033\[0m)", re.DOTALL)


def sgr(*params: int) -> str:
    """Build one escape sequence: sgr(1, 34) -> '\\033[1;34m'."""
    return f"\033[{';'.join(str(int(p)) for p in params)}m"


def _params(code: str) -> tuple[int, ...]:
    return tuple(int(part) for part in code.split(";"))


def _lookup(table: dict[str, str], field: str, name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    if not isinstance(name, str) or name not in table:
        raise InvalidStyleError(field, name)
    return table[name]


# ------------------------------------------------------------------------------
# STYLE REQUEST
# ------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StyleRequest:
    """SGR parameter groups; each group is emitted as one escape sequence."""

    groups: tuple[tuple[int, ...], ...] = ()

    def __bool__(self) -> bool:
        return bool(self.groups)

    @property
    def prefix(self) -> str:
        return "".join(sgr(*group) for group in self.groups)

    def apply(self, text: str) -> str:
        if not text or not self.groups:
            return text
        return f"{self.prefix}{text}{RESET}"

    @classmethod
    def from_codes(
        cls,
        style: Optional[int] = None,
        color: Optional[int] = None,
        bg: Optional[int] = None,
    ) -> StyleRequest:
        if not (style or color or bg):
            return cls()
        group = [int(style or 0), int(WHITE if color is None else color)]
        if bg is not None:
            group.append(int(bg) + 10)
        return cls((tuple(group),))

    @classmethod
    def from_names(
        cls,
        foreground: Optional[str] = None,
        background: Optional[str] = None,
        underline: bool = False,
    ) -> StyleRequest:
        fg_code = _lookup(FOREGROUND_COLORS, "foreground", foreground)
        bg_code = _lookup(BACKGROUND_COLORS, "background", background)
        groups: list[tuple[int, ...]] = []
        if fg_code is not None:
            groups.append(_params(fg_code))
        if bg_code is not None:
            groups.append(_params(bg_code))
        if underline:
            groups.append((UNDERLINE,))
        return cls(tuple(groups))


def style(
    text: str,
    style: Optional[int] = None,
    color: Optional[int] = None,
    bg: Optional[int] = None,
) -> str:
    """Wrap text in a single numeric SGR sequence.

    Weight defaults to 0 and color to WHITE once anything is set; ``bg`` is a
    foreground code and is shifted by 10. Values are not range checked.
    """
    return StyleRequest.from_codes(style, color, bg).apply(text)


def colorize(
    text: str,
    foreground: Optional[str] = None,
    background: Optional[str] = None,
    underline: bool = False,
) -> str:
    """Style text by color name, leaving already styled spans untouched.

    Raises InvalidStyleError for a name missing from FOREGROUND_COLORS or
    BACKGROUND_COLORS.
    """
    request = StyleRequest.from_names(foreground, background, underline)
    if not text or not request:
        return text
    parts = []
    for segment in _SPAN_RE.split(text):
        if not segment or _SPAN_RE.fullmatch(segment):
            parts.append(segment)
        else:
            parts.append(request.apply(segment))
    return "".join(parts)


# ------------------------------------------------------------------------------
# THEMES
# ------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Style:
    """Numeric style defaults; unset fields can be filled by the caller."""

    style: Optional[int] = None
    color: Optional[int] = None
    bg: Optional[int] = None

    def merged(
        self,
        style: Optional[int] = None,
        color: Optional[int] = None,
        bg: Optional[int] = None,
    ) -> Style:
        return replace(
            self,
            style=self.style if style is None else style,
            color=self.color if color is None else color,
            bg=self.bg if bg is None else bg,
        )

    def kwargs(self) -> dict[str, Optional[int]]:
        return {"style": self.style, "color": self.color, "bg": self.bg}


@dataclass(frozen=True, slots=True)
class Theme:
    prompt: Style = Style(color=YELLOW)
    key: Style = Style(color=CYAN)
    dim: Style = Style(style=DIM)
    progress: Style = Style(color=GREEN)
    comment: Style = Style(style=DIM)
    error: Style = Style(color=RED)
    info: Style = Style(color=BLUE)
    success: Style = Style(color=GREEN)
    warning: Style = Style(color=YELLOW)


THEMES: dict[str, Theme] = {
    "Default": Theme(),
    "Monochrome": Theme(
        prompt=Style(style=BOLD),
        key=Style(style=UNDERLINE),
        progress=Style(style=BOLD),
        error=Style(style=BOLD),
        info=Style(),
        success=Style(style=BOLD),
        warning=Style(style=BOLD),
    ),
}
