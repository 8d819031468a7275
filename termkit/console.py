from __future__ import annotations

import logging
import sys
from typing import Any, Optional, Sequence, TextIO

from termkit.config import ColorMode, ConsoleConfig
from termkit.progress import ProgressIndicator
from termkit.prompt import Options, Prompter
from termkit.style import Style, Theme, style as _style
from termkit.table import render_table
from termkit.terminal import Terminal
from termkit.width import wrap

logger = logging.getLogger("termkit")


class Console:
    """
    One terminal session: input, output and error streams plus the progress
    bar state. Streams default to the process's standard streams; pass
    ``io.StringIO`` objects to capture everything in tests.
    """

    def __init__(
        self,
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        error: Optional[TextIO] = None,
        config: Optional[ConsoleConfig] = None,
        theme: Optional[Theme] = None,
        terminal: Optional[Terminal] = None,
    ) -> None:
        self.input_stream = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.error_stream = error if error is not None else sys.stderr
        self.config = config or ConsoleConfig()
        self.theme = theme or Theme()
        self.terminal = terminal or Terminal(self.output)
        self.prompter = Prompter(self)
        self.progress_indicator = ProgressIndicator(self, bar_width=self.config.bar_width)

    # -- styling --------------------------------------------------------------

    @property
    def colors_enabled(self) -> bool:
        if self.config.color is ColorMode.ALWAYS:
            return True
        if self.config.color is ColorMode.NEVER:
            return False
        return self.terminal.is_interactive() and not self.terminal.environ.get("NO_COLOR")

    def style(
        self,
        text: str,
        style: Optional[int] = None,
        color: Optional[int] = None,
        bg: Optional[int] = None,
    ) -> str:
        if not self.colors_enabled:
            return text
        return _style(text, style=style, color=color, bg=bg)

    # -- output ---------------------------------------------------------------

    def emit(self, text: str, stream: Optional[TextIO] = None) -> None:
        """Write raw text (escape sequences included) and flush."""
        stream = stream if stream is not None else self.output
        stream.write(text)
        stream.flush()

    def write(
        self,
        text: str,
        style: Optional[int] = None,
        color: Optional[int] = None,
        bg: Optional[int] = None,
    ) -> None:
        self.emit(self.style(text, style, color, bg) + "\n")

    def _write_with(self, defaults: Style, text: str, stream: Optional[TextIO], **kwargs: Optional[int]) -> None:
        merged = defaults.merged(**kwargs)
        self.emit(self.style(text, **merged.kwargs()) + "\n", stream)

    def comment(self, text: str, style: Optional[int] = None, color: Optional[int] = None, bg: Optional[int] = None) -> None:
        self._write_with(self.theme.comment, text, None, style=style, color=color, bg=bg)

    def info(self, text: str, style: Optional[int] = None, color: Optional[int] = None, bg: Optional[int] = None) -> None:
        self._write_with(self.theme.info, text, None, style=style, color=color, bg=bg)

    def success(self, text: str, style: Optional[int] = None, color: Optional[int] = None, bg: Optional[int] = None) -> None:
        self._write_with(self.theme.success, text, None, style=style, color=color, bg=bg)

    def warning(self, text: str, style: Optional[int] = None, color: Optional[int] = None, bg: Optional[int] = None) -> None:
        self._write_with(self.theme.warning, text, None, style=style, color=color, bg=bg)

    def error(self, text: str, style: Optional[int] = None, color: Optional[int] = None, bg: Optional[int] = None) -> None:
        """Write to the error stream, red unless a color is given."""
        self._write_with(self.theme.error, text, self.error_stream, style=style, color=color, bg=bg)

    def table(self, rows: Sequence[Sequence[Any]], header: Optional[Sequence[Any]] = None) -> None:
        rendered = render_table(rows, header)
        if rendered:
            self.emit(rendered)

    def progress(self, step: Optional[int] = None, total_steps: int = 10) -> None:
        self.progress_indicator.advance(step, total_steps)

    # -- input ----------------------------------------------------------------

    def input(self) -> str:
        """Read one line without its line ending; '' at end of input."""
        line = self.input_stream.readline()
        if not line:
            logger.debug("end of input")
            return ""
        return line.rstrip("\r\n")

    def choice(self, text: str, options: Options, default: Optional[str] = None) -> Optional[str]:
        return self.prompter.choice(text, options, default)

    def confirm(self, text: str, default: bool = True) -> bool:
        return self.prompter.confirm(text, default)

    def prompt(self, text: str) -> str:
        return self.prompter.prompt(text)

    # -- geometry -------------------------------------------------------------

    def get_width(self) -> int:
        return self.terminal.columns() or self.config.fallback_width

    def get_height(self) -> int:
        return self.terminal.rows() or self.config.fallback_height

    def wrap(self, text: str, max_width: Optional[int] = None) -> str:
        """Word-wrap to ``max_width`` or the terminal width, whichever is smaller."""
        limits = [w for w in (max_width, self.terminal.columns()) if w is not None]
        if not limits:
            return text
        return "\n".join(wrap(text, min(limits)))
