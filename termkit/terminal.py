from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

logger = logging.getLogger("termkit")


def _env_int(env: Mapping[str, str], name: str) -> int:
    try:
        return int(env.get(name, 0))
    except ValueError:
        return 0


class Terminal:
    """Best-effort terminal geometry and TTY detection for one stream."""

    def __init__(self, stream: Optional[TextIO] = None, environ: Optional[Mapping[str, str]] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.environ = os.environ if environ is None else environ

    def size(self) -> Optional[os.terminal_size]:
        """Terminal size, or None when it cannot be determined.

        COLUMNS and LINES override what the terminal reports, like
        ``shutil.get_terminal_size`` does.
        """
        columns = _env_int(self.environ, "COLUMNS")
        lines = _env_int(self.environ, "LINES")
        if columns <= 0 or lines <= 0:
            try:
                reported = os.get_terminal_size(self.stream.fileno())
            except (AttributeError, ValueError, OSError) as exc:
                if columns > 0 or lines > 0:
                    logger.debug("terminal size unavailable, using environment only: %s", exc)
                    return os.terminal_size((max(columns, 0), max(lines, 0)))
                logger.debug("terminal size unavailable: %s", exc)
                return None
            columns = columns if columns > 0 else reported.columns
            lines = lines if lines > 0 else reported.lines
        return os.terminal_size((columns, lines))

    def columns(self) -> Optional[int]:
        size = self.size()
        if size is None or size.columns <= 0:
            return None
        return size.columns

    def rows(self) -> Optional[int]:
        size = self.size()
        if size is None or size.lines <= 0:
            return None
        return size.lines

    def is_interactive(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (ValueError, OSError):
            # closed or detached stream
            return False
