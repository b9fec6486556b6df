"""Terminal port — styled text output."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TextStyle:
    """Styling applied to a single text segment."""
    bold: bool = False
    italic: bool = False
    color: str | None = None


class TerminalPort(Protocol):
    """Port for writing text segments, optionally styled.

    Implementations decide whether styling is actually emitted
    (e.g. not when output is redirected).
    """

    def write(self, text: str, style: TextStyle | None = None) -> None: ...
