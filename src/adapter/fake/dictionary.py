"""In-memory implementation of DictionaryPort for testing."""

from domain.model.errors import DictionaryLookupError
from domain.model.word import WordEntry


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured entries or raises."""

    def __init__(
        self,
        entries: list[WordEntry] | None = None,
        error: DictionaryLookupError | None = None,
    ):
        self.entries = entries or []
        self.error = error
        self.last_phrase: str | None = None

    def lookup(self, phrase: str) -> list[WordEntry]:
        self.last_phrase = phrase
        if self.error is not None:
            raise self.error
        return self.entries
