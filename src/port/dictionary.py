"""Dictionary port — outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.word import WordEntry


class DictionaryPort(Protocol):
    """Port for looking up word entries.

    lookup() returns the entries in service order or raises a
    DictionaryLookupError subclass.
    """

    def lookup(self, phrase: str) -> list[WordEntry]: ...
