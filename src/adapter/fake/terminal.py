"""In-memory implementation of TerminalPort for testing."""

from port.terminal import TextStyle


class RecordingTerminal:
    """Fake terminal that records every written segment."""

    def __init__(self):
        self.segments: list[tuple[str, TextStyle | None]] = []

    def write(self, text: str, style: TextStyle | None = None) -> None:
        self.segments.append((text, style))

    @property
    def text(self) -> str:
        """Everything written so far, without styling."""
        return "".join(text for text, _ in self.segments)

    def styles_of(self, text: str) -> list[TextStyle | None]:
        """Styles used for segments exactly equal to ``text``."""
        return [style for segment, style in self.segments if segment == text]
