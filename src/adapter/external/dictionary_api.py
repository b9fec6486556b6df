"""Free Dictionary API adapter.

Implements DictionaryPort by fetching English entries from
dictionaryapi.dev and decoding them into WordEntry models.

Transport, service and decode failures are logged at INFO; unknown words
and successful lookups at DEBUG. The dic command configures WARNING, so
these records appear only when setup_structured_logging() is given a
lower level.

API Documentation: https://dictionaryapi.dev
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from domain.model.errors import DecodeError, NotFoundError, ServiceError, TransportError
from domain.model.word import WordEntry

logger = logging.getLogger(__name__)

DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"

_WORD_ENTRIES = TypeAdapter(list[WordEntry])


class DictionaryApiAdapter:
    """Adapter that looks up words on the Free Dictionary API.

    The phrase is appended to the base URL as-is; httpx only escapes
    what a path segment requires.
    """

    def __init__(self, client: httpx.Client, base_url: str = DICTIONARY_API_BASE_URL):
        self._client = client
        self._base_url = base_url

    def lookup(self, phrase: str) -> list[WordEntry]:
        """Fetch and decode dictionary entries for a phrase.

        Args:
            phrase: The word or phrase to look up.

        Returns:
            Word entries in the order the service returned them.

        Raises:
            TransportError: The request could not be completed.
            NotFoundError: The service returned 404.
            ServiceError: The service returned any other non-200 status.
            DecodeError: The body is not a list of word entries.
        """
        url = self._base_url + phrase

        try:
            response = self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.info(
                "Dictionary API request error",
                extra={"phrase": phrase, "error_type": type(e).__name__},
            )
            raise TransportError(e) from e

        if response.status_code == 404:
            logger.debug("Word not found in dictionary API", extra={"phrase": phrase})
            raise NotFoundError()

        if response.status_code != 200:
            logger.info(
                "Dictionary API HTTP error",
                extra={"phrase": phrase, "status_code": response.status_code},
            )
            raise ServiceError()

        try:
            entries = _WORD_ENTRIES.validate_json(response.content)
        except ValidationError as e:
            logger.info(
                "Dictionary API returned an undecodable body",
                extra={"phrase": phrase, "error_count": e.error_count()},
            )
            raise DecodeError(e) from e

        logger.debug(
            "Dictionary API lookup successful",
            extra={"phrase": phrase, "entry_count": len(entries)},
        )
        return entries
