from __future__ import annotations

import locale
import logging
import math
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from termkit.console import Console

logger = logging.getLogger("termkit")

CURSOR_UP = "\033[1A"
ERASE_LINE = "\033[K"
BELL = "\007"
# carriage return, up one line, erase it, back to column 0
REDRAW = f"\r{CURSOR_UP}\r{ERASE_LINE}\r"


def fpercent(value: float, decimals: int = 0) -> str:
    """Format a fraction as a percentage: fpercent(0.5) -> '50%'"""
    pct = value * 100
    if decimals:
        return f"{pct:,.{decimals}f}%"
    return f"{round(pct):,}%"


def locale_percent(value: float) -> str:
    """Like fpercent, but grouped with the active LC_NUMERIC locale."""
    return locale.format_string("%d", round(value * 100), grouping=True) + "%"


class ProgressIndicator:
    """
    Single-line progress bar that redraws itself in place.

    Not safe to share between threads or between unrelated progress
    sequences; each Console owns one.
    """

    def __init__(
        self,
        console: Console,
        bar_width: int = 10,
        formatter: Callable[[float], str] = fpercent,
    ) -> None:
        self.console = console
        self.bar_width = max(1, bar_width)
        self.formatter = formatter
        self.last_step: Optional[int] = None

    def bar(self, step: int, total_steps: int = 10) -> str:
        step = max(step, 1)
        total_steps = max(total_steps, 1)

        percent = step / total_steps
        # half up, so 2.5 segments fill 3
        filled = min(self.bar_width, math.floor(percent * self.bar_width + 0.5))
        segments = "#" * filled + "." * (self.bar_width - filled)

        colored = self.console.style(segments, **self.console.theme.progress.kwargs())
        return f"[{colored}] {self.formatter(percent)}"

    def advance(self, step: Optional[int] = None, total_steps: int = 10) -> None:
        if step is None:
            logger.debug("progress cleared at step %s", self.last_step)
            self.last_step = None
            self.console.emit(CURSOR_UP + ERASE_LINE)
            self.console.emit(BELL)
            return

        # A previous step of 0 counts as nothing drawn yet.
        if self.last_step and self.last_step <= step:
            self.console.emit(REDRAW)
        elif self.last_step:
            logger.debug("progress went back from %s to %s, drawing a new line", self.last_step, step)

        self.last_step = step
        self.console.write(self.bar(step, total_steps))
