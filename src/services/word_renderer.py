"""Render dictionary lookup results as styled terminal text.

Layout of one entry:

    1. word [/wɜːd/]

    noun
    def. A distinct meaningful element of speech or writing.
    ex.  I don't like the word 'unofficial'.
    syn. term, expression

    def. A command, password, or signal.

Entries are separated by a blank line. Within a part of speech a blank
line precedes a definition once any earlier definition of that part of
speech has printed an example, synonyms or antonyms.
"""

from domain.model.word import Definition, Meaning, WordEntry
from port.terminal import TerminalPort, TextStyle

WORD_STYLE = TextStyle(bold=True, color="green")
PART_OF_SPEECH_STYLE = TextStyle(color="yellow")
LABEL_STYLE = TextStyle(italic=True)
DEFINITION_STYLE = TextStyle(bold=True, color="blue")


class WordRenderer:
    """Writes word entries to a TerminalPort."""

    def __init__(self, terminal: TerminalPort):
        self.terminal = terminal

    def render(self, entries: list[WordEntry]) -> None:
        for index, entry in enumerate(entries):
            if index > 0:
                self.terminal.write("\n")
            self.render_entry(entry, index)

    def render_entry(self, entry: WordEntry, index: int) -> None:
        """Write one entry; ``index`` is its 0-based position in the result."""
        self.terminal.write(f"{index + 1}. {entry.word}", WORD_STYLE)

        phonetics = entry.phonetic_texts
        if phonetics:
            self.terminal.write(f" [{', '.join(phonetics)}]")

        if entry.meanings:
            self.terminal.write("\n")
            for meaning in entry.meanings:
                self.render_meaning(meaning)

    def render_meaning(self, meaning: Meaning) -> None:
        if meaning.part_of_speech:
            self.terminal.write("\n")
            self.terminal.write(meaning.part_of_speech, PART_OF_SPEECH_STYLE)
            self.terminal.write("\n")

        content_after_definition = False
        for definition in meaning.definitions:
            if content_after_definition:
                self.terminal.write("\n")
            if self.render_definition(definition):
                content_after_definition = True

    def render_definition(self, definition: Definition) -> bool:
        """Write one definition block.

        Returns:
            True if anything beyond the definition line was written.
        """
        self.terminal.write("def. ", LABEL_STYLE)
        self.terminal.write(f"{definition.definition}\n", DEFINITION_STYLE)

        has_content = False

        if definition.example:
            has_content = True
            self._write_labelled("ex.  ", f"{definition.example}\n")

        synonyms = definition.present_synonyms
        if synonyms:
            has_content = True
            self._write_labelled("syn.", f" {', '.join(synonyms)}\n")

        antonyms = definition.present_antonyms
        if antonyms:
            has_content = True
            self._write_labelled("ant.", f" {', '.join(antonyms)}\n")

        return has_content

    def _write_labelled(self, label: str, content: str) -> None:
        # Label is italic, content always plain.
        self.terminal.write(label, LABEL_STYLE)
        self.terminal.write(content)
