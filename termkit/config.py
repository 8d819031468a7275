from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

logger = logging.getLogger("termkit")


class ColorMode(str, Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


@dataclass(slots=True)
class ConsoleConfig:
    color: ColorMode = ColorMode.ALWAYS
    bar_width: int = 10
    fallback_width: int = 80
    fallback_height: int = 24

    def __post_init__(self) -> None:
        try:
            self.color = ColorMode(self.color)
        except ValueError as exc:
            raise ValueError(f"Unknown color mode: {self.color!r}") from exc
        if self.bar_width < 1:
            raise ValueError("ConsoleConfig.bar_width must be at least 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ConsoleConfig:
        env = os.environ if environ is None else environ
        cfg = cls()

        mode = env.get("TERMKIT_COLOR", "").strip().lower()
        if mode:
            try:
                cfg.color = ColorMode(mode)
            except ValueError:
                logger.warning("Ignoring invalid TERMKIT_COLOR=%r", mode)
        # https://no-color.org wins over everything else.
        if env.get("NO_COLOR"):
            cfg.color = ColorMode.NEVER
        elif env.get("FORCE_COLOR"):
            cfg.color = ColorMode.ALWAYS

        raw_width = env.get("TERMKIT_BAR_WIDTH")
        if raw_width:
            try:
                width = int(raw_width)
            except ValueError:
                width = 0
            if width >= 1:
                cfg.bar_width = width
            else:
                logger.warning("Ignoring invalid TERMKIT_BAR_WIDTH=%r", raw_width)
        return cfg
