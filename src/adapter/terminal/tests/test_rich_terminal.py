"""Tests for RichTerminal styling behaviour."""

import io
import unittest

from rich.console import Console

from adapter.terminal.rich_terminal import RichTerminal
from port.terminal import TextStyle


def _terminal(force_terminal: bool) -> tuple[RichTerminal, io.StringIO]:
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=force_terminal,
        color_system="standard" if force_terminal else None,
        highlight=False,
    )
    return RichTerminal(console), buffer


class TestRichTerminal(unittest.TestCase):

    def test_plain_when_not_a_terminal(self):
        """Test no escape codes are written to a non-interactive stream."""
        terminal, buffer = _terminal(force_terminal=False)

        terminal.write("1. hello", TextStyle(bold=True, color="green"))
        terminal.write(" [/x/]")
        terminal.write("\n")

        self.assertEqual(buffer.getvalue(), "1. hello [/x/]\n")

    def test_styled_when_terminal(self):
        """Test bold and colour codes are emitted on a terminal."""
        terminal, buffer = _terminal(force_terminal=True)

        terminal.write("word", TextStyle(bold=True, color="green"))

        output = buffer.getvalue()
        self.assertIn("\x1b[", output)
        self.assertIn("word", output)

    def test_unstyled_segment_has_no_codes(self):
        """Test segments without a style are written verbatim even on a terminal."""
        terminal, buffer = _terminal(force_terminal=True)

        terminal.write("a big house\n")

        self.assertEqual(buffer.getvalue(), "a big house\n")

    def test_markup_not_interpreted(self):
        """Test square brackets are written literally."""
        terminal, buffer = _terminal(force_terminal=False)

        terminal.write("[bold]not markup[/bold]")

        self.assertEqual(buffer.getvalue(), "[bold]not markup[/bold]")

    def test_no_newline_added(self):
        """Test writes are not newline-terminated."""
        terminal, buffer = _terminal(force_terminal=False)

        terminal.write("def. ")
        terminal.write("text")

        self.assertEqual(buffer.getvalue(), "def. text")
