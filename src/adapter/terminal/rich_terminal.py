"""Rich adapter for TerminalPort."""

from rich.console import Console
from rich.style import Style

from port.terminal import TextStyle


class RichTerminal:
    """Writes styled segments through a rich Console.

    Console.out is used so text is never parsed as markup, highlighted
    or wrapped. Rich drops the styling itself when the console is not
    attached to an interactive terminal.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def write(self, text: str, style: TextStyle | None = None) -> None:
        self.console.out(text, style=_to_rich_style(style), end="", highlight=False)


def _to_rich_style(style: TextStyle | None) -> Style | None:
    if style is None:
        return None
    return Style(bold=style.bold or None, italic=style.italic or None, color=style.color)
