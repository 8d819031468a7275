"""
termkit - styled terminal output, tables, progress bars and prompts.
"""

import logging

from termkit.config import ColorMode, ConsoleConfig  # noqa
from termkit.console import Console  # noqa
from termkit.errors import InvalidStyleError, TermkitError  # noqa
from termkit.progress import ProgressIndicator, fpercent, locale_percent  # noqa
from termkit.prompt import Prompter  # noqa
from termkit.style import THEMES, StyleRequest, Theme, colorize, style  # noqa
from termkit.table import render_table  # noqa
from termkit.terminal import Terminal  # noqa
from termkit.width import strip, vlen, wrap  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))

logging.getLogger("termkit").addHandler(logging.NullHandler())
