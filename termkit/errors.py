from __future__ import annotations

from typing import Any


class TermkitError(Exception):
    """Base class for errors raised by termkit."""


class InvalidStyleError(TermkitError, ValueError):
    """A named color is not in its color table."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} color: {value!r}")
