from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Sequence, Union

from termkit.style import BOLD, DIM
from termkit.width import pad, vlen

if TYPE_CHECKING:
    from termkit.console import Console

Options = Union[Sequence[str], Mapping[str, str]]


class Prompter:
    """Line-based prompts: choice, confirm and free text."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def choice(self, text: str, options: Options, default: Optional[str] = None) -> Optional[str]:
        """
        Ask the user to pick one of ``options``.

        ``options`` is either a list of tokens or a mapping of token to
        description. Matching is case-insensitive; empty input, end of input
        and unknown answers all resolve to ``default``.
        """
        console = self.console
        theme = console.theme
        console.write(text, **theme.prompt.kwargs())

        prefix = ""
        if isinstance(options, Mapping):
            tokens = list(options.keys())
            longest = max((vlen(token) for token in tokens), default=0)
            for token, description in options.items():
                key = pad(f"  [{token}]", longest + 6)
                console.write(
                    console.style(key, **theme.key.kwargs())
                    + console.style(description, **theme.dim.kwargs())
                )
            prefix = console.style("Choice", **theme.prompt.kwargs())
        else:
            tokens = list(options)

        listed = []
        for token in tokens:
            weight = BOLD if token == default else DIM
            listed.append(console.style(token, **theme.key.merged(style=weight).kwargs()))
        console.write(f"{prefix} ({'/'.join(listed)})")

        answer = console.input() or default
        if answer is not None:
            for token in tokens:
                if token.lower() == answer.lower():
                    return token
        return default

    def confirm(self, text: str, default: bool = True) -> bool:
        return self.choice(text, ["y", "n"], "y" if default else "n") == "y"

    def prompt(self, text: str) -> str:
        self.console.write(text, **self.console.theme.prompt.kwargs())
        return self.console.input()
