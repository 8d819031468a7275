"""Visible width of styled text."""

from __future__ import annotations

import functools
import re
import unicodedata

from termkit.style import RESET

ANSI_RE = re.compile(r"\033\[[\d;]*m")


@functools.lru_cache(maxsize=4096)
def strip(text: str) -> str:
    """Remove SGR escape sequences."""
    return ANSI_RE.sub("", text)


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("F", "W"):
        return 2
    return 1


def vlen(text: str) -> int:
    """Number of terminal cells the text occupies once escapes are removed."""
    return sum(_char_width(ch) for ch in strip(str(text)))


def pad(text: str, width: int, align: str = "left", char: str = " ") -> str:
    """Pad text to a visible width."""
    padding = max(0, width - vlen(text))
    if align == "left":
        return text + char * padding
    if align == "right":
        return char * padding + text
    left = padding // 2
    return char * left + text + char * (padding - left)


def _cut_word(word: str, width: int) -> list[str]:
    chunks = []
    while vlen(word) > width:
        cut = vis = 0
        while cut < len(word):
            m = ANSI_RE.match(word, cut)
            if m:
                cut = m.end()
                continue
            w = _char_width(word[cut])
            if vis + w > width and vis > 0:
                break
            vis += w
            cut += 1
        chunks.append(word[:cut])
        word = word[cut:]
    chunks.append(word)
    return chunks


def wrap(text: str, width: int, cut: bool = False) -> list[str]:
    """
    Word-wrap text to a visible width.

    Escape codes stay attached to their words; a style that is still open at a
    line break is re-opened at the start of the next line. Words longer than
    ``width`` are kept whole unless ``cut`` is set.
    """
    if width <= 0:
        return [text]

    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph:
            lines.append("")
            continue

        current: list[str] = []
        current_len = 0
        active: list[str] = []

        for word in paragraph.split(" "):
            pieces = _cut_word(word, width) if cut and vlen(word) > width else [word]
            for i, piece in enumerate(pieces):
                piece_len = vlen(piece)
                if i == 0 and current and current_len + 1 + piece_len <= width:
                    current.append(" " + piece)
                    current_len += 1 + piece_len
                else:
                    if current:
                        if active:
                            current.append(RESET)
                        lines.append("".join(current))
                    current = ["".join(active) + piece]
                    current_len = piece_len
                for m in ANSI_RE.finditer(piece):
                    active = [] if m.group() == RESET else active + [m.group()]

        lines.append("".join(current))

    return lines
