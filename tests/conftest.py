import io

import pytest

from termkit.config import ConsoleConfig
from termkit.console import Console
from termkit.terminal import Terminal


class FakeTerminal(Terminal):
    def __init__(self, columns=None, rows=None, interactive=False) -> None:
        super().__init__(io.StringIO(), environ={})
        self._columns = columns
        self._rows = rows
        self._interactive = interactive

    def columns(self):
        return self._columns

    def rows(self):
        return self._rows

    def is_interactive(self) -> bool:
        return self._interactive


@pytest.fixture
def make_console():
    def _make(stdin: str = "", columns=None, rows=None, interactive=False, **kwargs) -> Console:
        out = io.StringIO()
        err = kwargs.pop("error", out)
        terminal = FakeTerminal(columns=columns, rows=rows, interactive=interactive)
        return Console(io.StringIO(stdin), out, err, terminal=terminal, **kwargs)

    return _make


@pytest.fixture
def console(make_console) -> Console:
    return make_console()


@pytest.fixture
def plain_console(make_console) -> Console:
    return make_console(config=ConsoleConfig(color="never"))
