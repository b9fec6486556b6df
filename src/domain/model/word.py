"""Word entry domain models.

Mirror the dictionary service's JSON schema. Instances are immutable and
populated once from a response body.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class _WireModel(BaseModel):
    """Base for models decoded from the wire.

    Missing or null text fields become "" and missing or null list
    fields become empty tuples.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Phonetic(_WireModel):
    """A single pronunciation."""
    text: str = ""
    audio: str = ""


class Definition(_WireModel):
    definition: str = ""
    example: str = ""
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()

    @property
    def present_synonyms(self) -> list[str]:
        """Synonyms with empty strings dropped."""
        return [s for s in self.synonyms if s]

    @property
    def present_antonyms(self) -> list[str]:
        """Antonyms with empty strings dropped."""
        return [a for a in self.antonyms if a]


class Meaning(_WireModel):
    """Definitions grouped under one part of speech."""
    part_of_speech: str = Field("", alias="partOfSpeech")
    definitions: tuple[Definition, ...] = ()


class WordEntry(_WireModel):
    """One entry of a dictionary lookup response."""
    word: str = ""
    phonetic: str = ""
    phonetics: tuple[Phonetic, ...] = ()
    origin: str = ""
    meanings: tuple[Meaning, ...] = ()

    @property
    def phonetic_texts(self) -> list[str]:
        """Non-empty phonetic spellings in response order."""
        return [p.text for p in self.phonetics if p.text]
